"""Closed vocabularies and generation tables for flower-industry companies."""

from enum import Enum
from typing import Dict, List, Tuple


class Category(str, Enum):
    """Company categories in the flower industry."""
    FLORIST = "Florist"
    NURSERY = "Nursery"
    WHOLESALE = "Wholesale"
    GROWER = "Grower"
    IMPORTER_EXPORTER = "Importer/Exporter"
    GARDEN_CENTER = "Garden Center"
    LANDSCAPING = "Landscaping"
    EVENT_FLORIST = "Event Florist"
    ONLINE_RETAILER = "Online Retailer"
    SUPPLIER = "Supplier"


class Specialty(str, Enum):
    """Flower specialties."""
    ROSES = "Roses"
    TULIPS = "Tulips"
    ORCHIDS = "Orchids"
    LILIES = "Lilies"
    SUNFLOWERS = "Sunflowers"
    CARNATIONS = "Carnations"
    CHRYSANTHEMUMS = "Chrysanthemums"
    HYDRANGEAS = "Hydrangeas"
    PEONIES = "Peonies"
    DAISIES = "Daisies"
    SUCCULENTS = "Succulents"
    TROPICAL_PLANTS = "Tropical Plants"
    NATIVE_PLANTS = "Native Plants"
    CUT_FLOWERS = "Cut Flowers"
    POTTED_PLANTS = "Potted Plants"
    DRIED_FLOWERS = "Dried Flowers"
    WEDDING_FLOWERS = "Wedding Flowers"
    FUNERAL_ARRANGEMENTS = "Funeral Arrangements"
    CORPORATE_EVENTS = "Corporate Events"
    SEASONAL_ARRANGEMENTS = "Seasonal Arrangements"


class EmployeeRange(str, Enum):
    """Employee count ranges."""
    MICRO = "1-10"
    SMALL = "11-50"
    MEDIUM = "51-200"
    LARGE = "201-500"
    VERY_LARGE = "501-1000"
    ENTERPRISE = "1000+"


class BusinessType(str, Enum):
    """Business type classifications."""
    B2B = "B2B"
    B2C = "B2C"
    BOTH = "Both"


class RevenueRange(str, Enum):
    """Annual revenue ranges."""
    UNDER_100K = "Under $100K"
    FROM_100K_TO_500K = "$100K-$500K"
    FROM_500K_TO_1M = "$500K-$1M"
    FROM_1M_TO_5M = "$1M-$5M"
    FROM_5M_TO_10M = "$5M-$10M"
    FROM_10M_TO_50M = "$10M-$50M"
    OVER_50M = "$50M+"


class Certification(str, Enum):
    """Industry certifications."""
    ORGANIC_CERTIFIED = "Organic Certified"
    FAIR_TRADE = "Fair Trade"
    RAINFOREST_ALLIANCE = "Rainforest Alliance"
    VERIFLORA = "Veriflora"
    MPS = "MPS"
    GLOBALGAP = "GlobalG.A.P."
    USDA_ORGANIC = "USDA Organic"
    CARBON_NEUTRAL = "Carbon Neutral"
    FSC_CERTIFIED = "FSC Certified"
    ISO_14001 = "ISO 14001"


class Country(str, Enum):
    """Countries where flower companies operate."""
    UNITED_STATES = "United States"
    NETHERLANDS = "Netherlands"
    COLOMBIA = "Colombia"
    ECUADOR = "Ecuador"
    KENYA = "Kenya"
    ETHIOPIA = "Ethiopia"
    JAPAN = "Japan"
    GERMANY = "Germany"
    UNITED_KINGDOM = "United Kingdom"
    FRANCE = "France"
    ITALY = "Italy"
    SPAIN = "Spain"
    AUSTRALIA = "Australia"
    CANADA = "Canada"
    MEXICO = "Mexico"
    BRAZIL = "Brazil"
    CHINA = "China"
    INDIA = "India"
    THAILAND = "Thailand"
    SOUTH_AFRICA = "South Africa"


# Plain string views, in declaration order
CATEGORIES: Tuple[str, ...] = tuple(member.value for member in Category)
SPECIALTIES: Tuple[str, ...] = tuple(member.value for member in Specialty)
EMPLOYEE_RANGES: Tuple[str, ...] = tuple(member.value for member in EmployeeRange)
BUSINESS_TYPES: Tuple[str, ...] = tuple(member.value for member in BusinessType)
REVENUE_RANGES: Tuple[str, ...] = tuple(member.value for member in RevenueRange)
CERTIFICATIONS: Tuple[str, ...] = tuple(member.value for member in Certification)
COUNTRIES: Tuple[str, ...] = tuple(member.value for member in Country)


# Weighted toward Florist, Nursery and Wholesale
CATEGORY_WEIGHTS: List[Tuple[Category, float]] = [
    (Category.FLORIST, 25),
    (Category.NURSERY, 20),
    (Category.WHOLESALE, 18),
    (Category.GROWER, 10),
    (Category.IMPORTER_EXPORTER, 7),
    (Category.GARDEN_CENTER, 6),
    (Category.LANDSCAPING, 5),
    (Category.EVENT_FLORIST, 4),
    (Category.ONLINE_RETAILER, 3),
    (Category.SUPPLIER, 2),
]

# USA 40%, Netherlands 15%, Colombia 10%, the rest share 35%
COUNTRY_WEIGHTS: List[Tuple[Country, float]] = [
    (Country.UNITED_STATES, 40),
    (Country.NETHERLANDS, 15),
    (Country.COLOMBIA, 10),
    (Country.ECUADOR, 5),
    (Country.KENYA, 4),
    (Country.ETHIOPIA, 2),
    (Country.JAPAN, 3),
    (Country.GERMANY, 3),
    (Country.UNITED_KINGDOM, 3),
    (Country.FRANCE, 2),
    (Country.ITALY, 2),
    (Country.SPAIN, 2),
    (Country.AUSTRALIA, 2),
    (Country.CANADA, 2),
    (Country.MEXICO, 1),
    (Country.BRAZIL, 1),
    (Country.CHINA, 1),
    (Country.INDIA, 1),
    (Country.THAILAND, 0.5),
    (Country.SOUTH_AFRICA, 0.5),
]


NAME_PREFIXES: List[str] = [
    "Bloom", "Flora", "Petal", "Garden", "Rose", "Lily", "Orchid", "Meadow",
    "Spring", "Botanical", "Green", "Verdant", "Floral", "Blossom", "Nature",
    "Evergreen", "Paradise", "Royal", "Golden", "Silver", "Valley", "Mountain",
    "Coastal", "Urban", "Classic", "Premier", "Elite", "Sunrise", "Sunset",
    "Crystal",
]

NAME_SUFFIXES: List[str] = [
    "Flowers", "Florist", "Gardens", "Nursery", "Blooms", "Botanics", "Florals",
    "Plants", "Greenery", "Growers", "Farm", "Co.", "Inc.", "LLC", "Group",
    "International", "Wholesale", "Supply", "Trading", "Imports",
]

# The empty entry means a middle draw can still produce no middle part
NAME_MIDDLES: List[str] = [
    "", "& Sons", "& Co.", "Brothers", "Sisters", "Family", "Premium",
    "Artisan", "Heritage", "Modern",
]

NAME_REGIONS: List[str] = ["East", "West", "North", "South", "Central", "Pacific", "Atlantic"]


FALLBACK_CITY = "Capital City"

CITIES_BY_COUNTRY: Dict[Country, List[str]] = {
    Country.UNITED_STATES: [
        "New York", "Los Angeles", "Chicago", "Miami", "San Francisco",
        "Seattle", "Denver", "Austin", "Boston", "Portland",
    ],
    Country.NETHERLANDS: ["Amsterdam", "Rotterdam", "Aalsmeer", "The Hague", "Utrecht", "Eindhoven"],
    Country.COLOMBIA: ["Bogotá", "Medellín", "Cali", "Rionegro", "Facatativá"],
    Country.ECUADOR: ["Quito", "Guayaquil", "Cayambe", "Latacunga", "Tabacundo"],
    Country.KENYA: ["Nairobi", "Naivasha", "Nakuru", "Eldoret", "Thika"],
    Country.ETHIOPIA: ["Addis Ababa", "Bahir Dar", "Hawassa", "Ziway"],
    Country.JAPAN: ["Tokyo", "Osaka", "Nagoya", "Fukuoka", "Sapporo"],
    Country.GERMANY: ["Berlin", "Munich", "Hamburg", "Frankfurt", "Cologne"],
    Country.UNITED_KINGDOM: ["London", "Manchester", "Birmingham", "Edinburgh", "Bristol"],
    Country.FRANCE: ["Paris", "Lyon", "Nice", "Bordeaux", "Marseille"],
    Country.ITALY: ["Milan", "Rome", "Florence", "Bologna", "Turin"],
    Country.SPAIN: ["Madrid", "Barcelona", "Valencia", "Seville", "Málaga"],
    Country.AUSTRALIA: ["Sydney", "Melbourne", "Brisbane", "Perth", "Adelaide"],
    Country.CANADA: ["Toronto", "Vancouver", "Montreal", "Calgary", "Ottawa"],
    Country.MEXICO: ["Mexico City", "Guadalajara", "Monterrey", "Puebla", "Tijuana"],
    Country.BRAZIL: ["São Paulo", "Rio de Janeiro", "Brasília", "Curitiba", "Belo Horizonte"],
    Country.CHINA: ["Shanghai", "Beijing", "Shenzhen", "Guangzhou", "Kunming"],
    Country.INDIA: ["Mumbai", "Delhi", "Bangalore", "Pune", "Chennai"],
    Country.THAILAND: ["Bangkok", "Chiang Mai", "Phuket", "Pattaya", "Khon Kaen"],
    Country.SOUTH_AFRICA: ["Cape Town", "Johannesburg", "Durban", "Pretoria", "Port Elizabeth"],
}


DESCRIPTION_TEMPLATES: List[str] = [
    "A leading {category} specializing in {specialty}. Established in {year}, serving customers with quality {product}.",
    "Family-owned {category} since {year}. Known for exceptional {specialty} and personalized service.",
    "Premier {category} offering the finest {specialty}. {businessType} focused with {cert} certification.",
    "Your trusted source for {specialty}. Operating as a {category} since {year}.",
    "Dedicated to providing beautiful {specialty} to customers worldwide. A {category} committed to excellence.",
    "Innovative {category} bringing fresh {specialty} to the market since {year}.",
    "Award-winning {category} recognized for outstanding {specialty}. Proudly serving the {region} region.",
    "Sustainable {category} focused on eco-friendly {specialty} production and distribution.",
    "Boutique {category} crafting unique {specialty} arrangements since {year}.",
    "Industry-leading {category} with a passion for {specialty} and customer satisfaction.",
]
