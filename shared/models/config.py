from typing import Literal

from pydantic import BaseModel


class EnvConfig(BaseModel):
    """
    Declares one environment setting a client needs before it can send requests.

    The full variable name is built by the client as "<TYPE>_<ENGINE>_<env_key>",
    e.g. "ANALYTICS_GOOGLE_ACCESS_TOKEN".

    Attributes:
        env_key (str): The client-local key of the environment variable.
        val_type (str): Expected value type: "string", "number", "bool" or "list".
        default (str | int | float | bool | list | None): Value used when the variable is not set.
            None marks the setting as required.
    """

    env_key: str
    val_type: Literal["string", "number", "bool", "list"] = "string"
    default: str | int | float | bool | list | None = None
