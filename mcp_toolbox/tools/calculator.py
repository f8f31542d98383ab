"""Tool: Arithmetic calculator."""

import logging
import math
from dataclasses import dataclass
from typing import Any

from mcp_toolbox.errors import ToolValidationError
from mcp_toolbox.tools.base import BaseTool
from mcp_toolbox.tools.schema import FieldSpec, FieldType, InputSchema

logger = logging.getLogger(__name__)

OPERATIONS = ("add", "subtract", "multiply", "divide", "power", "sqrt")
UNARY_OPERATIONS = ("sqrt",)


@dataclass(frozen=True)
class CalculatorInput:
    operation: str
    a: float
    b: float | None = None


class CalculatorTool(BaseTool[CalculatorInput]):
    """Tool performing basic arithmetic on one or two operands."""

    name = "calculator"
    description = (
        "Performs mathematical operations including add, subtract, "
        "multiply, divide, power, and square root"
    )
    input_schema = InputSchema(
        fields=(
            FieldSpec(
                "operation",
                FieldType.ENUM,
                description="The mathematical operation to perform",
                required=True,
                values=OPERATIONS,
            ),
            FieldSpec(
                "a",
                FieldType.NUMBER,
                description="The first operand",
                required=True,
            ),
            FieldSpec(
                "b",
                FieldType.NUMBER,
                description="The second operand (not required for sqrt)",
            ),
        )
    )

    def parse_input(self, values: dict[str, Any]) -> CalculatorInput:
        params = CalculatorInput(**values)

        if params.operation not in UNARY_OPERATIONS and params.b is None:
            raise ToolValidationError(
                f"b is required for {params.operation} operation", "b"
            )
        if params.operation == "divide" and params.b == 0:
            raise ToolValidationError("Division by zero is not allowed", "b")
        if params.operation == "sqrt" and params.a < 0:
            raise ToolValidationError(
                "Cannot calculate square root of negative number", "a"
            )
        return params

    async def run(self, params: CalculatorInput) -> dict[str, Any]:
        result = self._calculate(params)
        if isinstance(result, float) and not math.isfinite(result):
            raise ToolValidationError(
                f"Result of {params.operation} is not a finite number"
            )

        inputs: dict[str, Any] = {"a": params.a}
        if params.b is not None:
            inputs["b"] = params.b

        logger.debug(f"calculator {params.operation} -> {result}")
        return {
            "result": result,
            "operation": params.operation,
            "inputs": inputs,
        }

    def _calculate(self, params: CalculatorInput) -> float:
        a, b = params.a, params.b
        op = params.operation
        try:
            if op == "add":
                return a + b
            if op == "subtract":
                return a - b
            if op == "multiply":
                return a * b
            if op == "divide":
                return a / b
            if op == "power":
                return math.pow(a, b)
            if op == "sqrt":
                return math.sqrt(a)
        except OverflowError:
            raise ToolValidationError(f"Result of {op} is too large")
        except ValueError:
            # math.pow domain error, e.g. negative base with fractional exponent
            raise ToolValidationError(f"Result of {op} is not a real number")
        raise ToolValidationError(f"Invalid operation: {op}")
