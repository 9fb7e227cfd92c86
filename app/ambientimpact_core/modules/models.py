from pydantic import BaseModel, Field
from typing import List

class ModulePermissions(BaseModel):
    # Welche Bus-Events darf das Modul abonnieren?
    subscribe: List[str] = Field(default_factory=list)
    # Welche Events darf es selbst feuern?
    emit: List[str] = Field(default_factory=list)

class ModuleManifest(BaseModel):
    id: str = Field(..., description="Eindeutige ID, gleichzeitig der Provider seiner Plugins, z.B. 'ambientimpact_core'")
    name: str = Field(..., description="Anzeigename")
    version: str = Field(..., description="Semantische Versionierung")
    description: str = Field(default="Keine Beschreibung")
    author: str = Field(default="Unknown")
    icon: str = Field(default="extension")

    type: str = Field(default="PLUGIN", description="'CORE' oder 'PLUGIN'")

    permissions: ModulePermissions = Field(default_factory=ModulePermissions)
