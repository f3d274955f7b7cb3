from typing import Optional


class FinanzasError(Exception):
    """Base de los errores de dominio que la API traduce a respuestas HTTP."""

    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(FinanzasError):
    """Entrada inválida: nombre del campo + motivo."""

    status_code = 400

    def __init__(self, field: str, reason: str):
        super().__init__(reason)
        self.field = field
        self.reason = reason


class NotFound(FinanzasError):
    status_code = 404

    def __init__(self, resource: str, resource_id: Optional[int] = None):
        super().__init__(f"{resource} no encontrada")
        self.resource = resource
        self.resource_id = resource_id


class TransportFailure(FinanzasError):
    """La base de datos no respondió o la consulta falló."""

    status_code = 503

    def __init__(self, detail: str = "Error de comunicación con la base de datos"):
        super().__init__(detail)
