"""
Dictionary routes: /api/dictionary
"""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from lowkeese.core.dictionary import FORWARD, REVERSE
from lowkeese.core.translator import Translator
from lowkeese.server.deps import get_translator


router = APIRouter(prefix="/api/dictionary", tags=["dictionary"])


class TeachRequest(BaseModel):
    english: str
    lowkeese: str


@router.post("/teach")
async def teach(req: TeachRequest, translator: Translator = Depends(get_translator)):
    """Teach an English ↔ Lowkeese pair. Empty pairs are ignored."""
    added = translator.teach(req.english, req.lowkeese)
    return {"added": added, "english": req.english, "lowkeese": req.lowkeese}


@router.get("/{direction}")
async def get_entries(direction: str, translator: Translator = Depends(get_translator)):
    """Merged dictionary for one direction."""
    if direction not in (FORWARD, REVERSE):
        raise HTTPException(status_code=404, detail=f"Unknown direction: {direction}")
    entries = translator.dictionary.entries(direction)
    return {"direction": direction, "count": len(entries), "entries": entries}
