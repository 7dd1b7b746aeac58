from pydantic import BaseModel

class ExerciseRead(BaseModel):
    id: int
    name: str
    category: str

    model_config = {"from_attributes": True}
