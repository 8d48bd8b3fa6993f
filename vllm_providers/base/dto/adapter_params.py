"""Typed parameter object for adapter construction.

Purpose
-------
Capture the settings a registry factory needs to build a client, validated at
registration time rather than on first use.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and ``.model_dump()`` convenience.

Failure modes
-------------
- Pure data container. ``pydantic.ValidationError`` is raised for inputs of
  the wrong type. Emptiness of ``base_url``/``model`` is deliberately not
  checked here: the connection builder reports it as a configuration error
  on first use, before any I/O.
"""
from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class AdapterParams(BaseModel):
    """Client construction parameters.

    Attributes
    ----------
    base_url:
        Inference server base address, without the ``/v1`` suffix.
    model:
        Model identifier understood by the server.
    api_key:
        Bearer credential, forwarded verbatim (servers commonly accept a
        dummy value).
    timeout_seconds:
        Optional per-request timeout handed to the SDK. ``None`` leaves calls
        unbounded.
    headers:
        Static HTTP headers added to every request.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = ""
    model: str = ""
    api_key: str = ""
    timeout_seconds: Optional[float] = Field(default=None, gt=0)
    headers: Dict[str, str] = Field(default_factory=dict)


__all__ = ["AdapterParams"]
