"""
AWS Lambda entry point.

Wraps the FastAPI application with Mangum so API Gateway HTTP API
events are served by the same routes as a local uvicorn run. The JWT
authorizer claims travel in the event and are read by the identity
dependency through the ``aws.event`` scope key.
"""

from mangum import Mangum

from tradesim.main import app

# Lambda has no lifespan events; use request-mode price refresh there.
handler = Mangum(app, lifespan="off")
