# festivals/templates.py
"""
Festival templates: the parts of a festival that do not change from one
edition to the next. Dates are (month, day) with January = 1.
"""
from datetime import date

FESTIVAL_TEMPLATES = [
    {
        "id": "cannes",
        "name": "Cannes Film Festival",
        "region": "europe",
        "location": "Cannes, France",
        "website": "https://www.festival-cannes.com",
        "contacts": [
            {
                "name": "Thierry Frémaux",
                "role": "Artistic Director",
                "email": "thierry.fremaux@festival-cannes.fr",
                "phone": "+33 4 93 99 71 71",
            },
        ],
        "dates": {
            "film_submission_deadline": (3, 15),
            "producers_hub_deadline": (4, 1),
            "festival_start_date": (5, 14),
            "festival_end_date": (5, 25),
        },
        "number_of_days": 12,
    },
    {
        "id": "sundance",
        "name": "Sundance Film Festival",
        "region": "north-america",
        "location": "Park City, Utah, USA",
        "website": "https://www.sundance.org",
        "contacts": [
            {
                "name": "Kim Yutani",
                "role": "Director of Programming",
                "email": "programming@sundance.org",
                "phone": "+1 435 658 3456",
            },
        ],
        "dates": {
            "film_submission_deadline": (8, 15),
            "producers_hub_deadline": (9, 1),
            "festival_start_date": (1, 23),
            "festival_end_date": (2, 2),
        },
        "number_of_days": 11,
    },
    {
        "id": "berlin",
        "name": "Berlin International Film Festival",
        "region": "europe",
        "location": "Berlin, Germany",
        "website": "https://www.berlinale.de",
        "contacts": [
            {
                "name": "Carlo Chatrian",
                "role": "Artistic Director",
                "email": "info@berlinale.de",
                "phone": "+49 30 259 20 0",
            },
        ],
        "dates": {
            "film_submission_deadline": (10, 15),
            "producers_hub_deadline": (11, 1),
            "festival_start_date": (2, 13),
            "festival_end_date": (2, 23),
        },
        "number_of_days": 11,
    },
    {
        "id": "toronto",
        "name": "Toronto International Film Festival",
        "region": "north-america",
        "location": "Toronto, Canada",
        "website": "https://www.tiff.net",
        "contacts": [
            {
                "name": "Cameron Bailey",
                "role": "CEO & Artistic Director",
                "email": "info@tiff.net",
                "phone": "+1 416 599 8433",
            },
        ],
        "dates": {
            "film_submission_deadline": (5, 15),
            "producers_hub_deadline": (6, 1),
            "festival_start_date": (9, 4),
            "festival_end_date": (9, 14),
        },
        "number_of_days": 11,
    },
    {
        "id": "venice",
        "name": "Venice Film Festival",
        "region": "europe",
        "location": "Venice, Italy",
        "website": "https://www.labiennale.org",
        "contacts": [
            {
                "name": "Alberto Barbera",
                "role": "Artistic Director",
                "email": "info@labiennale.org",
                "phone": "+39 041 272 6500",
            },
        ],
        "dates": {
            "film_submission_deadline": (6, 15),
            "producers_hub_deadline": (7, 1),
            "festival_start_date": (8, 27),
            "festival_end_date": (9, 6),
        },
        "number_of_days": 11,
    },
    {
        "id": "busan",
        "name": "Busan International Film Festival",
        "region": "asia",
        "location": "Busan, South Korea",
        "website": "https://www.biff.kr",
        "contacts": [
            {
                "name": "Jay Jeon",
                "role": "Programmer",
                "email": "program@biff.kr",
                "phone": "+82 51 709 2200",
            },
        ],
        "dates": {
            "film_submission_deadline": (6, 30),
            "producers_hub_deadline": (7, 15),
            "festival_start_date": (10, 1),
            "festival_end_date": (10, 10),
        },
        "number_of_days": 10,
    },
]

TEMPLATES_BY_ID = {t["id"]: t for t in FESTIVAL_TEMPLATES}


def festival_from_template(template, year):
    festival = {
        "id": f"{template['id']}-{year}",
        "name": template["name"],
        "region": template["region"],
        "year": year,
        "number_of_days": template["number_of_days"],
        "location": template["location"],
        "website": template.get("website", ""),
        "contacts": [dict(c) for c in template["contacts"]],
    }
    for field, (month, day) in template["dates"].items():
        festival[field] = date(year, month, day)
    return festival


def generate_festivals(start_year, end_year):
    """Every template for every year in ``start_year..end_year`` (inclusive)."""
    return [
        festival_from_template(template, year)
        for year in range(start_year, end_year + 1)
        for template in FESTIVAL_TEMPLATES
    ]


def template_for(festival_id):
    """Template of a ``<template>-<year>`` festival id, or None."""
    template_id, sep, _year = festival_id.rpartition("-")
    if not sep:
        return None
    return TEMPLATES_BY_ID.get(template_id)
