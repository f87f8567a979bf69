"""
Exceptions for Metaltrace.

All errors are TrackingError with a structured code for programmatic handling.
"""

from decimal import Decimal
from typing import Any


class TrackingError(Exception):
    """
    Structured exception for tracking operations.

    Usage:
        try:
            tracking.elements.create('BM-2024-000001', 'beam')
        except TrackingError as e:
            if e.code == 'DUPLICATE_CODE':
                print(f"Código {e.data['element_code']} já marcado")

    Attributes:
        code: Error code for programmatic handling
        message: Human-readable message
        data: Additional context data
    """

    _default_messages = {
        'VALIDATION_ERROR': 'Dados inválidos',
        'INVALID_JSON': 'Corpo da requisição não é JSON válido',
        'INVALID_TYPE': 'Tipo inválido',
        'INVALID_STATUS': 'Status inválido',
        'INVALID_OPERATION': 'Operação inválida',
        'DUPLICATE_CODE': 'Já existe um elemento com este código',
        'ELEMENT_NOT_FOUND': 'Elemento não encontrado',
        'CONTROL_POINT_NOT_FOUND': 'Ponto de controle não encontrado',
        'UNKNOWN_ELEMENT': 'Elemento informado não existe',
        'UNKNOWN_LOCATION': 'Ponto de controle informado não existe',
        'INVALID_CREDENTIALS': 'E-mail ou senha incorretos',
        'NOT_AUTHENTICATED': 'Usuário não autenticado',
        'INVALID_TOKEN': 'Token inválido',
        'TOKEN_EXPIRED': 'Token expirado',
        'PERMISSION_DENIED': 'Permissões insuficientes',
        'NOT_FOUND': 'Recurso não encontrado',
        'METHOD_NOT_ALLOWED': 'Método não permitido',
    }

    default_code = 'VALIDATION_ERROR'

    def __init__(self, code: str | None = None, message: str | None = None, **data: Any):
        self.code = code or self.default_code
        self.message = message or self._default_messages.get(self.code, self.code)
        self.data = data
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code!r}, {self.message!r})"

    def as_dict(self) -> dict[str, Any]:
        """Serialize to dict (useful for APIs)."""
        return {
            'code': self.code,
            'message': self.message,
            'data': {
                k: str(v) if isinstance(v, Decimal) else v
                for k, v in self.data.items()
            }
        }


class DuplicateCodeError(TrackingError):
    """Element code collision on create. The existing row is left untouched."""

    default_code = 'DUPLICATE_CODE'

    def __init__(self, code_value: str, message: str | None = None):
        super().__init__('DUPLICATE_CODE', message, element_code=code_value)
