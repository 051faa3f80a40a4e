import logging
from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse
from pocketbase_typegen.core.errors import TypegenError
from pocketbase_typegen.generators.typescript_gen import generate
from pocketbase_typegen.schemas.collections import TypegenRequest

log = logging.getLogger(__name__)

router = APIRouter(prefix="/typegen")

@router.post("", response_class=PlainTextResponse)
def create_typegen(req: TypegenRequest):
    try:
        return generate(req.collections)
    except TypegenError as e:
        log.warning("Generation rejected: %s", e, extra={"source": "api", "stage": "generate"})
        raise HTTPException(status_code=422, detail=str(e))
