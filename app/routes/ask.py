"""Ask proxy endpoint."""
from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from campus.services.proxy.ask_proxy import AskProxy

router = APIRouter()
ask_proxy = AskProxy()

# Every method is routed here so non-POST requests get the JSON 405 body
ASK_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def get_ask_proxy() -> AskProxy:
    """Provide the shared, stateless ask proxy."""
    return ask_proxy


@router.api_route("/ask", methods=ASK_METHODS)
async def ask(request: Request, proxy: AskProxy = Depends(get_ask_proxy)):
    """
    Forward a campus question to the completion API.

    Request body: ``{"query": "..."}``

    Returns:
        ``{"answer": ...}`` on success (including relayed upstream errors),
        otherwise ``{"error": ...}`` with a 4xx/5xx status
    """
    try:
        body = await request.json()
    except ValueError:
        body = {}

    result = await run_in_threadpool(proxy.handle, request.method, body)
    return JSONResponse(status_code=result.status_code, content=result.body)


@router.get("/health")
async def ask_health():
    """Health check for the ask service."""
    return {"status": "healthy", "service": "ask"}
