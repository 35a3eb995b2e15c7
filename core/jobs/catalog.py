"""Fixed enumerations offered by the posting form and the browse pages."""

import re
from typing import Literal, Optional, get_args


JobCategory = Literal[
    "Administration",
    "Accounting & Finance",
    "Customer Service",
    "Education & Training",
    "Engineering",
    "Healthcare & Medical",
    "Hospitality & Tourism",
    "Human Resources",
    "Information Technology",
    "Legal",
    "Manufacturing",
    "Marketing & Communications",
    "Real Estate",
    "Retail & Sales",
    "Trades & Services",
    "Transport & Logistics",
]

JOB_CATEGORIES: tuple[str, ...] = get_args(JobCategory)

JOB_TYPES: tuple[str, ...] = ("Full-time", "Part-time", "Contract", "Internship")

MAX_CATEGORIES = 3

WESTERN_SYDNEY_LOCATIONS: tuple[str, ...] = (
    "Parramatta", "Blacktown", "Liverpool", "Fairfield", "Penrith",
    "Campbelltown", "Camden", "Bringelly", "Oran Park", "Mount Druitt",
    "St Marys", "Leppington", "Luddenham", "Kellyville", "Marsden Park",
    "Schofields", "Rouse Hill", "Castle Hill", "Baulkham Hills", "Merrylands",
    "Auburn", "Bankstown", "Cabramatta", "Wetherill Park", "Smithfield",
    "Prairiewood", "Bossley Park", "Horsley Park", "Cecil Park", "Kemps Creek",
    "Badgerys Creek", "Rossmore", "Catherine Field", "Harrington Park", "Narellan",
    "Smeaton Grange", "Gregory Hills", "Spring Farm", "Currans Hill", "Mount Annan",
    "Macarthur", "Minto", "Ingleburn", "Raby", "Bradbury",
    "Airds", "Ambarvale", "Claymore", "Eagle Vale", "Eschol Park",
    "Kearns", "Leumeah", "Macquarie Fields", "Minto Heights", "Ruse",
    "St Andrews", "Varroville", "Woodbine", "Glenfield", "Casula",
    "Prestons", "Miller", "Cartwright", "Sadleir", "Heckenberg",
    "Busby", "Green Valley", "Hinchinbrook", "Hoxton Park", "Len Waters Estate",
    "West Hoxton", "Carnes Hill", "Edmondson Park", "Denham Court", "Austral",
    "Lurnea", "Warwick Farm", "Chipping Norton", "Moorebank", "Hammondville",
    "Holsworthy", "Wattle Grove",
)


def browse_slug(name: str) -> str:
    """Slug for a category or suburb page: ``Accounting & Finance`` -> ``accounting-finance``."""
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")


def find_category(slug: str) -> Optional[str]:
    """Resolve a category page slug back to its category name."""
    for category in JOB_CATEGORIES:
        if browse_slug(category) == slug:
            return category
    return None


def find_location(slug: str) -> Optional[str]:
    """Resolve a suburb page slug back to its suburb name."""
    for location in WESTERN_SYDNEY_LOCATIONS:
        if browse_slug(location) == slug:
            return location
    return None
