"""
➡️ But : Définir les formats manipulés hors du store.

TodoItem → snapshot immuable renvoyé par le store (id=0 : jamais enregistré)

TodoCreate → corps de requête POST

TodoUpdate → corps PUT

TodoOut → réponse de l’API

🔹 Avantages :

Les appelants ne touchent jamais aux objets ORM : pas de modification "par effet de bord".

Pour modifier un item : item.model_copy(update={"done": True}) puis store.save(...).
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class TodoItem(BaseModel):
    id: int = Field(0, ge=0)
    name: str = ""
    notes: str = ""
    done: bool = False

    model_config = {"from_attributes": True, "frozen": True}

    @field_validator("name", "notes", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        # anciennes lignes : colonne ajoutée après coup, valeur NULL
        return "" if value is None else value

    @field_validator("done", mode="before")
    @classmethod
    def _none_as_false(cls, value: Any) -> Any:
        return False if value is None else value

    @property
    def is_persisted(self) -> bool:
        return self.id != 0


class TodoCreate(BaseModel):
    name: str = Field(..., min_length=1, examples=["Learn X"])
    notes: str = Field("", examples=["Attend Y"])
    done: bool = Field(False, examples=[False])


class TodoUpdate(BaseModel):
    name: str = Field(..., min_length=1, examples=["Learn X"])
    notes: str = Field("", examples=["Attend Y"])
    done: bool = Field(False, examples=[True])


class TodoOut(BaseModel):
    id: int
    name: str
    notes: str
    done: bool

    model_config = {"from_attributes": True}
