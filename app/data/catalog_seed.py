from datetime import date

CATALOG_AUTHORS = [
    {
        "first_name": "Berry",
        "last_name": "Griffin Beak Eldritch",
        "date_of_birth": date(1650, 7, 23),
        "main_category": "Ships",
        "courses": [
            {
                "title": "Commandeering a Ship Without Getting Caught",
                "description": "Commandeering a ship in rough waters isn't easy. Commandeering it without getting caught is even harder.",
            },
            {
                "title": "Overthrowing Mutiny",
                "description": "In this course, the author provides tips to avoid, or, if needed, overthrow pirate mutiny.",
            },
        ],
    },
    {
        "first_name": "Nancy",
        "last_name": "Swashbuckler Rye",
        "date_of_birth": date(1668, 5, 21),
        "main_category": "Rum",
        "courses": [
            {
                "title": "Avoiding Brawls While Drinking as Much Rum as You Desire",
                "description": "Every good pirate loves rum, but it also has a tendency to get you into trouble.",
            },
        ],
    },
    {
        "first_name": "Eli",
        "last_name": "Ivory Bones Sweet",
        "date_of_birth": date(1701, 12, 16),
        "main_category": "Singing",
        "courses": [
            {
                "title": "Singalong Pirate Hits",
                "description": "In this course you'll learn how to sing all-time favourite pirate songs.",
            },
        ],
    },
    {
        "first_name": "Arnold",
        "last_name": "The Unseen Stafford",
        "date_of_birth": date(1702, 3, 6),
        "main_category": "Singing",
        "courses": [],
    },
    {
        "first_name": "Seabury",
        "last_name": "Toxic Reyson",
        "date_of_birth": date(1690, 11, 23),
        "main_category": "Maps",
        "courses": [],
    },
    {
        "first_name": "Rutherford",
        "last_name": "Fearless Venom",
        "date_of_birth": date(1723, 4, 5),
        "date_of_death": date(1768, 9, 1),
        "main_category": "General debauchery",
        "courses": [],
    },
]
