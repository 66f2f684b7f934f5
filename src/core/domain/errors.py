"""Errores del cliente Echo Nest.

Jerarquía:
- `EchoNestError`: base de todo lo que puede lanzar el cliente.
- `ApiError`: el servicio rechazó la llamada (HTTP no-2xx o `status.code != 0`).
- `Unauthorized`: API key inválida o sin permisos para el método.
- `MalformedResponse`: el envelope JSON no tiene la forma esperada.
- `NetworkError`: fallo de conexión o timeout en el transporte.

Ninguno se reintenta localmente: todos se propagan al llamador.
"""

from __future__ import annotations

# Códigos de `response.status.code` que indican credenciales inválidas.
# 1 = missing/invalid API key, 2 = API key not allowed to call this method.
UNAUTHORIZED_STATUS_CODES: frozenset[int] = frozenset({1, 2})


class EchoNestError(Exception):
    """Base de todos los errores del cliente."""


class ApiError(EchoNestError):
    """El servicio respondió, pero rechazó la petición."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code

    def __str__(self) -> str:
        parts: list[str] = []
        if self.status_code is not None:
            parts.append(f"HTTP {self.status_code}")
        if self.code is not None:
            parts.append(f"Echo Nest API Error {self.code}")
        prefix = " / ".join(parts)
        return f"{prefix}: {self.message}" if prefix else self.message


class Unauthorized(ApiError):
    """API key o credenciales no válidas."""


class MalformedResponse(EchoNestError):
    """El cuerpo de la respuesta no respeta el envelope esperado."""


class NetworkError(EchoNestError):
    """Error de red (conexión, DNS, timeout)."""


def api_error_for(
    message: str,
    *,
    status_code: int | None = None,
    code: int | None = None,
) -> ApiError:
    """Construye el `ApiError` adecuado según el código HTTP/envelope."""

    if status_code in (401, 403) or code in UNAUTHORIZED_STATUS_CODES:
        return Unauthorized(message, status_code=status_code, code=code)
    return ApiError(message, status_code=status_code, code=code)
