# app/models.py
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field
from frames.table import Table


class QueryModel(BaseModel):
    """Per-query parameters sent by the front end."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    ref_id: str = Field("A", alias="refId")
    table_name: str = Field("", alias="tableName")


class QueryDataRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    plugin_context: Optional[Dict[str, Any]] = Field(None, alias="pluginContext")
    # raw query objects; each is validated on its own so one bad query fails alone
    queries: List[Dict[str, Any]] = Field(default_factory=list)

    def instance_settings(self) -> Optional[Dict[str, Any]]:
        if not self.plugin_context:
            return None
        return self.plugin_context.get("dataSourceInstanceSettings")


class CheckHealthRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    plugin_context: Optional[Dict[str, Any]] = Field(None, alias="pluginContext")

    def instance_settings(self) -> Optional[Dict[str, Any]]:
        if not self.plugin_context:
            return None
        return self.plugin_context.get("dataSourceInstanceSettings")


# --- data frames -------------------------------------------------------------
class FrameField(BaseModel):
    name: str
    type: str = "string"
    labels: Dict[str, str] = Field(default_factory=dict)
    config: Dict[str, Any] = Field(default_factory=dict)


class FrameSchema(BaseModel):
    name: str
    fields: List[FrameField] = Field(default_factory=list)


class FrameData(BaseModel):
    values: List[List[str]] = Field(default_factory=list)


class Frame(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    frame_schema: FrameSchema = Field(alias="schema")
    data: FrameData

    @classmethod
    def from_table(cls, name: str, table: Table) -> "Frame":
        # every cell is materialized as text, the discovered kind rides along as a label
        fields = [FrameField(name=c.name, labels={"kind": c.kind.value}) for c in table.columns]
        values = [list(c.values) for c in table.columns]
        return cls(frame_schema=FrameSchema(name=name, fields=fields), data=FrameData(values=values))


class DataResponse(BaseModel):
    frames: Optional[List[Frame]] = None
    error: Optional[str] = None
    status: Optional[int] = None

    @classmethod
    def failed(cls, status: int, message: str) -> "DataResponse":
        return cls(error=message, status=status)


class QueryDataResponse(BaseModel):
    results: Dict[str, DataResponse] = Field(default_factory=dict)


class CheckHealthResult(BaseModel):
    status: str
    message: str
