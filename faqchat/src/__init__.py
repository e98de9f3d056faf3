"""
Core package for the FAQ chat backend.

This package contains the main application logic and components including:
- Data classes for FAQ entries, retrieval results and chat messages
- Services for FAQ storage, keyword retrieval and LLM integration
- API routes and middleware
- The chat client session
"""
