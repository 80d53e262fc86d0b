# app/services/results.py
"""
What an action hands back to the HTTP layer.

An action ends in exactly one of two terminal states:

* ``ActionState`` - rendered back into the form (validation errors, storage
  failures, delete confirmations).
* ``Redirect`` - the mutation went through; control moves to ``path`` and
  nothing is rendered for the submitting form.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from pydantic import BaseModel


class ActionState(BaseModel):
    message: Optional[str] = None
    error: Optional[Dict[str, List[str]]] = None


@dataclass(frozen=True)
class Redirect:
    path: str


ActionResult = Union[ActionState, Redirect]
