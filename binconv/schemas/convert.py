from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class ConversionOut(BaseModel):
    decimal: int = Field(description="Decimal value")
    binary: int = Field(description="Binary digits of the value, read as a decimal integer")


class ConversionResponse(BaseModel):
    requestId: str = Field(description="Request identifier")
    data: ConversionOut = Field(description="Conversion result")


class BatchRequest(BaseModel):
    values: List[int] = Field(description="Decimal values to encode", examples=[[2, 5, 10]])


class BatchResponse(BaseModel):
    requestId: str = Field(description="Request identifier")
    data: List[ConversionOut] = Field(description="Conversion results, in request order")


class DemoRowOut(BaseModel):
    decimal: int = Field(description="Decimal value")
    binary: int = Field(description="Encoded value")
    roundTrip: int = Field(description="Encoded value decoded again")


class DemoRange(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: int = Field(alias="from", description="First value of the table")
    to: int = Field(description="Last value of the table")


class DemoResponse(BaseModel):
    requestId: str = Field(description="Request identifier")
    range: DemoRange = Field(description="Table bounds")
    data: List[DemoRowOut] = Field(description="One row per value")


class MetaResponse(BaseModel):
    requestId: str = Field(description="Request identifier")
    data: Dict[str, object] = Field(description="Version and active limits")
