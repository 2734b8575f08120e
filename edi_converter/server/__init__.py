"""HTTP API package — FastAPI boundary around the conversion engine.

WHY: Clients that cannot import the Python package convert documents
over HTTP. Validation of request shape lives here, not in the core.

HOW: models.py holds the pydantic request/response schemas, app.py the
FastAPI application and its endpoints.
"""
