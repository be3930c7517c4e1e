# ABOUTME: Health check endpoint
# ABOUTME: Returns service health status

from fastapi import APIRouter

router = APIRouter()


@router.get("/health", responses={
    200: {"description": "Service is healthy", "content": {"application/json": {"example": {"status": "ok"}}}}
})
async def health_check():
    """Returns service health status."""
    return {"status": "ok"}
