"""
Erreurs remontées par le store.

- StorageUnavailable : la base ne peut pas être ouverte, ou la connexion est devenue inutilisable.
- ConstraintViolation : une contrainte SQL (clé primaire, NOT NULL...) a été violée ; rien n'est écrit.

"Introuvable" n'est PAS une exception : get() renvoie None, update()/delete() renvoient 0.
"""


class StoreError(Exception):
    pass


class StorageUnavailable(StoreError):
    pass


class ConstraintViolation(StoreError):
    pass
