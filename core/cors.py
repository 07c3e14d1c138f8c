from fastapi import Request
from fastapi.responses import JSONResponse

# The contact form is embedded on third-party pages, so every response is open.
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


async def add_cors_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


def error_response(status_code: int, message: str) -> JSONResponse:
    """JSON error body carrying the CORS headers.

    Used by exception handlers that run outside the http middleware stack.
    """
    return JSONResponse(
        status_code=status_code,
        content={"error": message},
        headers=CORS_HEADERS,
    )
