from pydantic import BaseModel, ConfigDict

class DeviceOut(BaseModel):
    id: int; name: str; ip_address: str; status: str
    # numeric text columns come back as str, like a string scan would
    model_config = ConfigDict(from_attributes=True, coerce_numbers_to_str=True)
