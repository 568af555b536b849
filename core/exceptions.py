from typing import Any, Dict, Optional

class CoordinateError(Exception):
    """
    通用坐标异常
    """
    def __init__(
        self,
        message: str,
        code: int = 400,
        payload: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.payload = payload or {}
        super().__init__(self.message)

class UnsupportedSystemError(CoordinateError):
    """
    不支持的坐标系标识
    """
    def __init__(self, message: str, system: Any = None):
        super().__init__(
            message=message,
            payload={"system": str(system)}
        )

class ConvergenceError(CoordinateError):
    """
    GCJ02 反算迭代未收敛
    """
    def __init__(self, message: str, iterations: int, delta: tuple):
        super().__init__(
            message=message,
            code=500,
            payload={"iterations": iterations, "delta": list(delta)}
        )
