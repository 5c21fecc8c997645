from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt
from typing import Annotated, Optional, Union

# JSON number: ints stay ints, floats stay floats, bools, numeric strings and nan/inf are rejected
Number = Union[StrictInt, Annotated[StrictFloat, Field(allow_inf_nan=False)]]


class WebhookSchema(BaseModel):
    """Base for every webhook sub-schema: unknown upstream keys are dropped and instances are immutable"""

    model_config = ConfigDict(frozen=True, extra="ignore")


class WebhookEventResponse(BaseModel):
    """Response model for webhook processing"""

    status: str  # "success" or "error"
    message: str
    event_type: Optional[str] = None
    processed: bool = False
