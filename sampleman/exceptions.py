"""
Exceptions for Sampleman.

All errors are SampleError with a structured code for programmatic handling.
Status resolution itself never raises; these cover the data-access side.
"""

from typing import Any


class SampleError(Exception):
    """
    Structured exception for sample status operations.

    Usage:
        try:
            samples.display_status_for(item_id)
        except SampleError as e:
            if e.code == 'ORDER_ITEM_NOT_FOUND':
                return redirect('sample-orders')

    Attributes:
        code: Error code for programmatic handling
        message: Human-readable message
        data: Additional context data
    """

    _default_messages = {
        'ORDER_ITEM_NOT_FOUND': 'Order item not found',
        'ORDER_ITEM_MODEL_NOT_CONFIGURED': "SAMPLEMAN['ORDER_ITEM_MODEL'] is not configured",
        'INVALID_ORDER_ITEM_MODEL': 'Order item model could not be loaded',
    }

    def __init__(self, code: str, message: str | None = None, **data: Any):
        self.code = code
        self.message = message or self._default_messages.get(code, code)
        self.data = data
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    @property
    def order_item_id(self) -> Any:
        """Shortcut for data['order_item_id']."""
        return self.data.get('order_item_id')

    def as_dict(self) -> dict[str, Any]:
        """Serialize to dict (useful for APIs)."""
        return {
            'code': self.code,
            'message': self.message,
            'data': {
                k: v if isinstance(v, (str, int, float, bool, type(None))) else str(v)
                for k, v in self.data.items()
            }
        }
