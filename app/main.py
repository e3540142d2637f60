from fastapi import FastAPI, Request
from app.api.routes import router as api_router
from app.config import get_settings
from app.schemas.schemas import Problem
from app.utils.upstream import UpstreamError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
import logging
import os

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Recipe Search Gateway")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(UpstreamError)
async def upstream_error_handler(request: Request, exc: UpstreamError):
    error = exc.error
    logger.warning("%s %s -> %s (%s)", request.method, request.url.path, error.status_code, error.kind)
    if error.status_code < 200 or error.status_code in (204, 304):
        # These statuses may not carry a body.
        return Response(status_code=error.status_code)
    problem = Problem(title=exc.title, status=error.status_code, detail=error.detail)
    return JSONResponse(
        status_code=error.status_code,
        content=problem.model_dump(exclude_none=True),
        media_type="application/problem+json",
    )

# Include our routes.
app.include_router(api_router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "80")))
