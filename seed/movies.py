from decimal import Decimal

movies = [
    {
        "id": 1234,
        "title": "Oppenheimer",
        "genre_ids": [18, 36],
        "original_language": "en",
        "release_date": "2023-07-19",
        "vote_average": Decimal("8.1"),
        "overview": "The story of J. Robert Oppenheimer's role in the development of the atomic bomb.",
    },
    {
        "id": 2345,
        "title": "Barbie",
        "genre_ids": [35, 12, 14],
        "original_language": "en",
        "release_date": "2023-07-19",
        "vote_average": Decimal("7.1"),
        "overview": "Barbie and Ken leave Barbieland and discover the real world.",
    },
    {
        "id": 3456,
        "title": "Past Lives",
        "genre_ids": [18, 10749],
        "original_language": "ko",
        "release_date": "2023-06-02",
        "vote_average": Decimal("7.8"),
        "overview": "Two childhood friends are reunited decades later in New York.",
    },
    {
        "id": 4567,
        "title": "Anatomy of a Fall",
        "genre_ids": [9648, 18, 80],
        "original_language": "fr",
        "release_date": "2023-08-23",
        "vote_average": Decimal("7.7"),
        "overview": "A woman is suspected of her husband's murder after his death at their chalet.",
    },
]

movie_casts = [
    {
        "movieId": 1234,
        "actorName": "Cillian Murphy",
        "roleName": "J. Robert Oppenheimer",
        "roleDescription": "Director of the Los Alamos Laboratory.",
    },
    {
        "movieId": 1234,
        "actorName": "Emily Blunt",
        "roleName": "Kitty Oppenheimer",
        "roleDescription": "Biologist and wife of Robert.",
    },
    {
        "movieId": 1234,
        "actorName": "Robert Downey Jr.",
        "roleName": "Lewis Strauss",
        "roleDescription": "Chairman of the Atomic Energy Commission.",
    },
    {
        "movieId": 2345,
        "actorName": "Margot Robbie",
        "roleName": "Barbie",
        "roleDescription": "Stereotypical Barbie.",
    },
    {
        "movieId": 2345,
        "actorName": "Ryan Gosling",
        "roleName": "Ken",
        "roleDescription": "Beach Ken.",
    },
    {
        "movieId": 3456,
        "actorName": "Greta Lee",
        "roleName": "Nora",
        "roleDescription": "A playwright living in New York.",
    },
    {
        "movieId": 3456,
        "actorName": "Teo Yoo",
        "roleName": "Hae Sung",
        "roleDescription": "Nora's childhood friend from Seoul.",
    },
    {
        "movieId": 4567,
        "actorName": "Sandra Huller",
        "roleName": "Sandra Voyter",
        "roleDescription": "Novelist accused of murder.",
    },
    # Aftersun has no row in Movies
    {
        "movieId": 5678,
        "actorName": "Paul Mescal",
        "roleName": "Calum",
        "roleDescription": "A young father on holiday with his daughter.",
    },
]
