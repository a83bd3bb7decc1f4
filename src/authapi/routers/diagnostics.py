from typing import Annotated

from fastapi import APIRouter, Depends

from authapi.models.responses import DebugEnvResponse, StatusResponse
from authapi.shared import Config

from .dependencies import get_config

router = APIRouter()

SET = "✅ Set"
NOT_SET = "❌ Not Set"


@router.get("/", response_model=StatusResponse)
async def root():
    return StatusResponse(success=True, message="Your server is up and running....")


@router.get("/debug-env", response_model=DebugEnvResponse)
async def debug_env(config: Annotated[Config, Depends(get_config)]):
    # Presence only, neither value is echoed back
    return DebugEnvResponse(
        supabase_url=SET if config.env.supabase_url else NOT_SET,
        supabase_anon_key=SET if config.env.supabase_anon_key else NOT_SET,
    )
