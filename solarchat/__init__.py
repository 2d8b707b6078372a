"""
Solar chat assistant backend.

Chat sessions, keyword-retrieval document library, and LLM-backed replies
for the website chat widget.
"""

__version__ = "0.1.0"
