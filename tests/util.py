import random
from datetime import timezone
from operator import itemgetter

from faker import Faker

from restaurants.models.restaurant import BOROUGHS

fake = Faker()

CUISINES = ('Italian', 'Thai', 'Colombian')
GRADES = ('A', 'B', 'C', 'D', 'F')


def generate_grade():
    return {
        "date": fake.past_datetime(tzinfo=timezone.utc),
        "grade": random.choice(GRADES),
    }


def generate_restaurant_data():
    """Generates a restaurant, usable either as seed data or as a request body once dumped."""
    return {
        "name": fake.company(),
        "borough": random.choice(BOROUGHS),
        "cuisine": random.choice(CUISINES),
        "address": {
            "building": fake.building_number(),
            "street": fake.street_name(),
            "zipcode": fake.postcode(),
        },
        "grades": [generate_grade() for _ in range(3)],
    }


def most_recent_grade(grades):
    return sorted(grades, key=itemgetter("date"), reverse=True)[0]["grade"]
