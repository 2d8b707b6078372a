"""
Core domain logic: chunking, keyword retrieval, prompt assembly, exceptions.

Pure-Python layer with no database or HTTP dependencies.
"""
