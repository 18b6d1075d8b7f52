"""
Translation routes: /api/translate
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from lowkeese.core.translator import Translator
from lowkeese.server.deps import get_translator


router = APIRouter(prefix="/api/translate", tags=["translate"])


class TranslateRequest(BaseModel):
    text: str


@router.post("/forward")
async def translate_forward(req: TranslateRequest, translator: Translator = Depends(get_translator)):
    """English → Lowkeese."""
    return {"text": translator.translate_forward(req.text)}


@router.post("/reverse")
async def translate_reverse(req: TranslateRequest, translator: Translator = Depends(get_translator)):
    """Lowkeese → English."""
    return {"text": translator.translate_reverse(req.text)}


@router.post("/auto")
async def translate_auto(req: TranslateRequest, translator: Translator = Depends(get_translator)):
    """Guess the direction, then translate."""
    result = translator.detect_and_translate(req.text)
    return {
        "text": result.text,
        "direction": result.direction,
        "label": result.label,
    }
