"""
Modeles SQLModel pour la base de donnees FilmCatalog.

Ces modeles representent les tables de la base de donnees.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- film: Films (version pour la synchronisation optimiste, imdb_id unique)
- beschreibung: Description d'un film (1:1, obligatoire)
- schauspieler: Acteurs d'un film (1:n, ordonnes par id)

La suppression d'un film supprime sa description et ses acteurs
(cascade ORM et ON DELETE CASCADE).
"""

from datetime import date, datetime, timezone
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field, Relationship, SQLModel


def utc_now() -> datetime:
    """Horodatage courant en UTC (avec fuseau)."""
    return datetime.now(timezone.utc)


class FilmModel(SQLModel, table=True):
    """
    Modele representant un film dans la base de donnees.

    Le genre (art) est stocke sous forme de texte (valeur de l'enum Filmart).
    """

    __tablename__ = "film"

    id: int | None = Field(default=None, primary_key=True)
    version: int = Field(default=0)
    imdb_id: str | None = Field(default=None, unique=True, index=True)
    titel: str = Field(index=True)
    bewertung: int = Field(default=0)
    art: str | None = None  # ex: "THRILLER"
    dauer_min: int | None = None
    erscheinungsdatum: date | None = None
    erzeugt: datetime | None = Field(
        default_factory=utc_now, sa_type=DateTime(timezone=True)
    )
    aktualisiert: datetime | None = Field(
        default_factory=utc_now, sa_type=DateTime(timezone=True)
    )

    beschreibung: Optional["BeschreibungModel"] = Relationship(
        back_populates="film",
        sa_relationship_kwargs={"uselist": False, "cascade": "all, delete-orphan"},
    )
    schauspieler: list["SchauspielerModel"] = Relationship(
        back_populates="film",
        sa_relationship_kwargs={
            "cascade": "all, delete-orphan",
            "order_by": "SchauspielerModel.id",
        },
    )


class BeschreibungModel(SQLModel, table=True):
    """Description d'un film, liee via film_id (unique)."""

    __tablename__ = "beschreibung"

    id: int | None = Field(default=None, primary_key=True)
    beschreibung: str
    film_id: int | None = Field(
        default=None,
        foreign_key="film.id",
        unique=True,
        ondelete="CASCADE",
    )

    film: Optional[FilmModel] = Relationship(back_populates="beschreibung")


class SchauspielerModel(SQLModel, table=True):
    """Acteur d'un film, lie via film_id."""

    __tablename__ = "schauspieler"

    id: int | None = Field(default=None, primary_key=True)
    vorname: str
    nachname: str
    rolle: str | None = None
    film_id: int | None = Field(
        default=None,
        foreign_key="film.id",
        index=True,
        ondelete="CASCADE",
    )

    film: Optional[FilmModel] = Relationship(back_populates="schauspieler")
