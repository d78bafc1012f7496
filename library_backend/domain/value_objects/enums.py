from enum import Enum


class Genre(str, Enum):
    ACTION = "ACTION"
    ADVENTURE = "ADVENTURE"
    COMEDY = "COMEDY"
    CRIME = "CRIME"
    DRAMA = "DRAMA"
    FANTASY = "FANTASY"
    HISTORICAL = "HISTORICAL"
    HORROR = "HORROR"
    MYSTERY = "MYSTERY"
    PHILOSOPHICAL = "PHILOSOPHICAL"
    POLITICAL = "POLITICAL"
    ROMANCE = "ROMANCE"
    SAGA = "SAGA"
    SATIRE = "SATIRE"
    SCIENCE_FICTION = "SCIENCE_FICTION"
    THRILLER = "THRILLER"
    URBAN = "URBAN"
    WESTERN = "WESTERN"


# Display labels are presentation-only; the store keeps the enum value.
GENRE_LABELS: dict[Genre, str] = {
    Genre.ACTION: "Ação",
    Genre.ADVENTURE: "Aventura",
    Genre.COMEDY: "Comédia",
    Genre.CRIME: "Crime",
    Genre.DRAMA: "Drama",
    Genre.FANTASY: "Fantasia",
    Genre.HISTORICAL: "Histórico",
    Genre.HORROR: "Terror",
    Genre.MYSTERY: "Mistério",
    Genre.PHILOSOPHICAL: "Filosófico",
    Genre.POLITICAL: "Político",
    Genre.ROMANCE: "Romance",
    Genre.SAGA: "Saga",
    Genre.SATIRE: "Sátira",
    Genre.SCIENCE_FICTION: "Ficção Científica",
    Genre.THRILLER: "Suspense",
    Genre.URBAN: "Urbano",
    Genre.WESTERN: "Faroeste",
}


def genre_label(genre: Genre) -> str:
    """Return the human-readable label for ``genre``."""
    return GENRE_LABELS[genre]
