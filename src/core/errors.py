"""Errores del cliente de pipelines.

Dos niveles:
- Ausencia (HTTP 404): no es un error; los métodos devuelven `None`/`False`.
- Fallo (cualquier otro status no exitoso): se lanza `UnexpectedResponseError`
  con la línea de status HTTP en el mensaje.
"""

from __future__ import annotations

from typing import Any


class ATCError(Exception):
    """Base de todos los errores del cliente."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Representación serializable (para `--json` y logs)."""

        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class UnexpectedResponseError(ATCError):
    """El ATC respondió con un status que no es éxito ni 404."""

    def __init__(self, *, method: str, url: str, status_code: int, reason: str, body: str = "") -> None:
        self.method = method
        self.url = url
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(
            f"unexpected response from {method} {url}: {status_code} {reason}",
            details={
                "method": method,
                "url": url,
                "status_code": status_code,
                "reason": reason,
            },
        )

    @property
    def status_line(self) -> str:
        return f"{self.status_code} {self.reason}"


class ResponseDecodeError(ATCError):
    """El cuerpo de una respuesta exitosa no es JSON válido o no encaja en el modelo."""

    def __init__(self, *, url: str, cause: Exception) -> None:
        self.url = url
        self.cause = cause
        super().__init__(
            f"could not decode response from {url}: {cause}",
            details={"url": url},
        )


class InvalidPipelineNameError(ATCError):
    """Nombre de pipeline vacío: el path resultante apuntaría a otro endpoint."""

    def __init__(self, *, param: str) -> None:
        self.param = param
        super().__init__(f"{param} must not be empty", details={"param": param})
