"""CORS Headers — fixed cross-origin header set stamped on every response.

Invariants:
    - Headers present on success, 400 and 405 responses alike
    - Values are fixed: any origin, credentials allowed, the browser's full method list

Design Decisions:
    - Plain http middleware over CORSMiddleware: CORSMiddleware only answers when an
      Origin header is present and rejects unknown preflights, while the web client
      expects the same headers on every response regardless of origin
"""

from fastapi import Request

CORS_HEADERS = {
    "Access-Control-Allow-Credentials": "true",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,OPTIONS,PATCH,DELETE,POST,PUT",
    "Access-Control-Allow-Headers": (
        "X-CSRF-Token, X-Requested-With, Accept, Accept-Version, "
        "Content-Length, Content-MD5, Content-Type, Date, X-Api-Version"
    ),
}


async def permissive_cors_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response
