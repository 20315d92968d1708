# app/infrastructure/api/responses.py
from typing import Optional, Union

from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import BaseModel

from app.domain.models.action_result import ActionMessage, ActionState, Navigate


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    details: Optional[str] = None


def to_response(result: Union[ActionState, ActionMessage, Navigate]):
    """
    Traduce el resultado de una acción a una respuesta HTTP.
    Navigate es terminal: se convierte en un 303 hacia la ruta indicada.
    """
    if isinstance(result, Navigate):
        return RedirectResponse(result.path, status_code=303)
    if isinstance(result, ActionState):
        return JSONResponse(status_code=422, content=result.model_dump(exclude_none=True))
    status_code = 200 if result.type == "Success" else 400
    return JSONResponse(status_code=status_code, content=result.model_dump())
