"""
Root responder - fixed JSON payload so the deployment root never 404s
"""
from fastapi import FastAPI
from fastapi.responses import JSONResponse

ROOT_PAYLOAD = {"message": "Hello World", "docs": "/api/docs", "trpc": "/api/trpc"}

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


def root_response() -> JSONResponse:
    """API health check"""
    return JSONResponse(status_code=200, content=dict(ROOT_PAYLOAD))


root_app = FastAPI(title="Root", docs_url=None, redoc_url=None, openapi_url=None)


# Request content is ignored: every path and method gets the same answer
@root_app.api_route("/{full_path:path}", methods=ALL_METHODS, include_in_schema=False)
async def root(full_path: str):
    return root_response()
