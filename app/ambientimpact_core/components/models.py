from pydantic import BaseModel, Field

class ComponentDefinition(BaseModel):
    id: str = Field(..., description="Eindeutige Komponenten-ID, z.B. 'icon'")
    title: str = Field(..., description="Anzeigename")
    description: str = Field(default="")
    provider: str = Field(..., description="ID des Moduls, das die Komponente mitbringt")
