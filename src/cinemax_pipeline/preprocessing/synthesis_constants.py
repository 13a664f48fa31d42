## Constants used to fill presentation fields the corpus does not provide

# Release year range used when the title carries no "(YYYY)"
RANDOM_YEAR_RANGE: tuple[int, int] = (1980, 2024)   # [low, high)
RUNTIME_RANGE: tuple[int, int] = (80, 180)          # minutes, [low, high)
TOTAL_RATINGS_RANGE: tuple[int, int] = (1000, 101000)
POPULARITY_RANGE: tuple[int, int] = (1, 101)
AVERAGE_RATING_MIN: float = 6.0
AVERAGE_RATING_SPAN: float = 4.0

# Title patterns
YEAR_IN_TITLE_PATTERN = r"\((\d{4})\)"
TITLE_YEAR_SUFFIX_PATTERN = r"\(\d{4}(?:/[IV]+)?\)"

CERTIFICATIONS: tuple[str, ...] = ("G", "PG", "PG-13", "R", "NC-17")

# Genres whose display label is not a plain first-letter capitalization
GENRE_LABEL_OVERRIDES: dict[str, str] = {
    "sci-fi": "Sci-Fi",
    "tv-movie": "TV Movie",
    "reality-tv": "Reality TV",
    "talk-show": "Talk Show",
    "game-show": "Game Show",
}
UNKNOWN_GENRE_LABEL = "Unknown"

UNSPLASH_BASE_URL = "https://images.unsplash.com"
POSTER_PHOTO_IDS: tuple[str, ...] = (
    "photo-1489599510095-d93d9ad86e8d",
    "photo-1440404653325-ab127d49abc1",
    "photo-1518676590629-3dcbd9c5a5c9",
    "photo-1506905925346-21bda4d32df4",
    "photo-1574375927938-d5a98e8ffe85",
    "photo-1536440136628-849c177e76a1",
    "photo-1594909122845-11baa439b7bf",
    "photo-1515634928627-2a4e0dae3ddf",
)
POSTER_SIZE = "w=500&h=750&fit=crop"
BACKDROP_SIZE = "w=1280&h=720&fit=crop"
PORTRAIT_SIZE = "w=100&h=100&fit=crop"

DIRECTORS_BY_GENRE: dict[str, tuple[str, ...]] = {
    "action": ("John McTiernan", "Michael Bay", "James Cameron", "Zack Snyder"),
    "drama": ("Martin Scorsese", "Christopher Nolan", "David Fincher", "Paul Thomas Anderson"),
    "comedy": ("Judd Apatow", "Adam McKay", "Edgar Wright", "Christopher Guest"),
    "horror": ("John Carpenter", "Wes Craven", "Jordan Peele", "James Wan"),
    "thriller": ("Alfred Hitchcock", "Denis Villeneuve", "Brian De Palma", "David Lynch"),
    "sci-fi": ("Ridley Scott", "Denis Villeneuve", "Christopher Nolan", "James Cameron"),
    "documentary": ("Werner Herzog", "Errol Morris", "Morgan Spurlock", "Alex Gibney"),
}
DEFAULT_DIRECTORS: tuple[str, ...] = ("Unknown Director", "Independent Director", "Emerging Director")
DIRECTOR_IMAGE = f"{UNSPLASH_BASE_URL}/photo-1507003211169-0a1dd7228f2d?{PORTRAIT_SIZE}"

# (name, character, photo id)
PLACEHOLDER_CAST: tuple[tuple[str, str, str], ...] = (
    ("Lead Actor", "Main Character", "photo-1500648767791-00dcc994a43e"),
    ("Supporting Actor", "Supporting Role", "photo-1472099645785-5658abf4ff4e"),
)
PRODUCTION_COMPANIES: tuple[str, ...] = ("Independent Studio",)

# Rating distribution: each of stars 5..2 takes at most this share of what is left
RATING_BUDGET = 100
RATING_DRAW_SHARE = 0.6

RELEASE_DATE_TEMPLATE = "January 1, {year}"
