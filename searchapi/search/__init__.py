"""
Search service for the v1 public API.

This module ties the backend client to the response transformer:
1. Forward a multi-search request to the backend
2. Transform the raw response into the public schema
3. Report backend health
"""
