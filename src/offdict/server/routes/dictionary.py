"""
Compiled dictionary: /dictionary.json
"""

from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from offdict.server.deps import get_artifact_path


router = APIRouter(tags=["dictionary"])


@router.get("/dictionary.json")
async def get_dictionary(path: Path = Depends(get_artifact_path)):
    """Serve the compiled artifact as a static file."""
    if not path.is_file():
        raise HTTPException(status_code=404, detail="Dictionary not built; run `offdict build`")
    return FileResponse(path, media_type="application/json")
