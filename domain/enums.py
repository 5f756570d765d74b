"""
Domain enums for the catering application.
Contains all enumeration types used across the domain models.
"""

import enum


class ClassificationTier(str, enum.Enum):
    """Client tier derived from the calorie sum of the client's dishes"""

    LOW = "low"
    IDEAL = "ideal"
    HIGH = "high"


class DishCategory(str, enum.Enum):
    """Place of a dish in the menu"""

    STARTER = "starter"
    MAIN = "main"
    DESSERT = "dessert"
