"""
Job board web front end - FastAPI + Jinja2 pages and a JSON API.

Run with: uvicorn frontend.app:app
"""
