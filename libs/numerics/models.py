from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class FactorialResult(BaseModel):
    n: int
    value: int
    bits: Optional[int]

    def line(self) -> str:
        return f"factorial({self.n}) = {self.value}"


class MultipleScan(BaseModel):
    start: int = 1
    stop: int = 10
    factor: int = 3
    divisor: int = Field(4, gt=0)


class MultipleHit(BaseModel):
    index: int
    value: int
    divisor: int

    def line(self) -> str:
        return f"multiple of {self.divisor}: {self.value}"
