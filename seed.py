"""Sample catalog loaded into a fresh store at startup."""
from schemas import BrandCreate, CategoryCreate, ProductCreate
from storage import MemStorage

BRANDS = [
    {"name": "OXVA", "logo": "OXVA", "description": "Premium vaping devices"},
    {"name": "JAX", "logo": "JAX", "description": "Quality e-liquids and pods"},
    {"name": "LUNIX", "logo": "LUNIX", "description": "Innovative RGB box mods"},
    {"name": "NIXX", "logo": "NIXX", "description": "Filter pod systems"},
    {"name": "PANDA", "logo": "PANDA", "description": "Unique design vape devices"},
    {"name": "HOTCIG", "logo": "HOTCIG", "description": "High-performance mods"},
]

CATEGORIES = [
    {"name": "Pod Systems", "description": "Compact, portable vaping solutions", "icon": "tablet", "product_count": 42},
    {"name": "Box Mods", "description": "Advanced vaping devices with customizable settings", "icon": "box", "product_count": 28},
    {"name": "E-Liquids", "description": "Premium flavors for every taste", "icon": "droplet", "product_count": 56},
    {"name": "Accessories", "description": "Everything you need for the perfect setup", "icon": "tool", "product_count": 35},
]


def _image(label):
    return f"https://via.placeholder.com/400x400/121212/ffffff?text={label}"


# Prices are in cents.
PRODUCTS = [
    {
        "name": "Vprime Pro",
        "description": "The OXVA Vprime is a compact pod system with excellent performance and battery life, perfect for both beginners and experienced vapers.",
        "price": 45000000,
        "brand": "OXVA",
        "category": "Pod Systems",
        "images": [_image("OXVA+Vprime")],
        "colors": ["blue", "black", "pink", "green", "red", "purple", "gold", "silver", "white", "teal"],
        "is_new_arrival": True,
        "is_featured": True,
        "rating": 45,
        "review_count": 42,
        "specifications": {"battery": "1500mAh", "wattage": "5-40W", "capacity": "4.5ml"},
    },
    {
        "name": "Ghost Rabbit",
        "description": "The Joiway Ghost Rabbit features unique design and good performance in a compact package.",
        "price": 38000000,
        "discount_price": 42000000,
        "brand": "JOIWAY",
        "category": "Pod Systems",
        "images": [_image("Ghost+Rabbit")],
        "colors": ["blue", "pink"],
        "is_new_arrival": True,
        "rating": 40,
        "review_count": 28,
        "specifications": {"battery": "1200mAh", "wattage": "5-25W", "capacity": "3ml"},
    },
    {
        "name": "Mr Pro RGB Edition",
        "description": "The Lunix Mr Pro features vibrant RGB lighting and an innovative square design that stands out from the crowd.",
        "price": 52000000,
        "brand": "LUNIX",
        "category": "Pod Systems",
        "images": [_image("Lunix+Mr+Pro")],
        "colors": ["red", "white", "purple", "black"],
        "is_new_arrival": True,
        "rating": 43,
        "review_count": 32,
        "specifications": {"battery": "1800mAh", "wattage": "5-60W", "capacity": "5ml"},
    },
    {
        "name": "VEE 2 Limited Edition",
        "description": "The Panda VEE 2 Limited Edition features creative artwork and a powerful battery for all-day vaping.",
        "price": 49000000,
        "brand": "PANDA",
        "category": "Pod Systems",
        "images": [_image("Panda+VEE+2")],
        "colors": ["green", "blue", "black"],
        "is_new_arrival": True,
        "rating": 42,
        "review_count": 25,
        "specifications": {"battery": "1600mAh", "wattage": "5-45W", "capacity": "4ml"},
    },
    {
        "name": "Qita Series - Mango",
        "description": "A burst of flavor styled for amazing people. The JAX Qita Series Mango offers a tropical experience in every puff.",
        "price": 6500000,
        "brand": "JAX",
        "category": "E-Liquids",
        "subcategory": "Fruit",
        "images": [_image("Qita+Mango")],
        "is_featured": True,
        "rating": 45,
        "review_count": 42,
        "specifications": {"volume": "30ml", "nicotine": "3mg, 6mg", "vgpg": "70/30"},
    },
    {
        "name": "Qita Series - Jasmine Tea",
        "description": "A refreshing jasmine tea flavor with subtle sweet notes. Perfect for an all-day vape.",
        "price": 6500000,
        "brand": "JAX",
        "category": "E-Liquids",
        "subcategory": "Beverage",
        "images": [_image("Qita+Jasmine")],
        "is_featured": True,
        "rating": 44,
        "review_count": 38,
        "specifications": {"volume": "30ml", "nicotine": "3mg, 6mg", "vgpg": "70/30"},
    },
    {
        "name": "Qita Series - Matcha Tea",
        "description": "A perfect blend of authentic matcha tea flavor with light sweetness for a satisfying vape experience.",
        "price": 6500000,
        "brand": "JAX",
        "category": "E-Liquids",
        "subcategory": "Beverage",
        "images": [_image("Qita+Matcha")],
        "is_featured": True,
        "rating": 43,
        "review_count": 35,
        "specifications": {"volume": "30ml", "nicotine": "3mg, 6mg", "vgpg": "70/30"},
    },
    {
        "name": "R234 Pro Electrical Mod",
        "description": "The HOTCIG R234 Pro is a high-performance box mod with customizable settings and excellent build quality.",
        "price": 75000000,
        "discount_price": 85000000,
        "brand": "HOTCIG",
        "category": "Box Mods",
        "images": [_image("HOTCIG+R234")],
        "colors": ["black", "silver"],
        "is_featured": True,
        "rating": 50,
        "review_count": 28,
        "specifications": {"battery": "Dual 18650", "wattage": "5-234W", "temperature": "200°F-600°F"},
    },
    {
        "name": "Filter Plus Pod Kit",
        "description": "The NIXX Filter Plus pod kit offers a clean, filtered vaping experience in a sleek, portable design.",
        "price": 32500000,
        "brand": "NIXX",
        "category": "Pod Systems",
        "images": [_image("NIXX+Filter")],
        "colors": ["blue", "green", "orange", "black", "silver"],
        "is_featured": True,
        "rating": 40,
        "review_count": 16,
        "specifications": {"battery": "850mAh", "wattage": "Auto", "capacity": "2ml"},
    },
    {
        "name": "RTA 24mm Tank",
        "description": "The Nitrous RTA 24mm tank offers superior flavor and vapor production for enthusiasts.",
        "price": 32000000,
        "brand": "NITROUS",
        "category": "Accessories",
        "subcategory": "Tanks",
        "images": [_image("Nitrous+RTA")],
        "colors": ["silver", "black", "gunmetal"],
        "is_featured": True,
        "rating": 35,
        "review_count": 12,
        "specifications": {"diameter": "24mm", "capacity": "5ml", "deck": "Single/Dual Coil"},
    },
    {
        "name": "Oneo Pod Kit",
        "description": "The OXVA Oneo is a sleek pod kit with multiple color options and excellent flavor production.",
        "price": 29000000,
        "brand": "OXVA",
        "category": "Pod Systems",
        "images": [_image("OXVA+Oneo")],
        "colors": ["green", "orange", "red", "blue", "black", "pink", "grey", "teal", "purple", "brown"],
        "rating": 42,
        "review_count": 22,
        "specifications": {"battery": "900mAh", "wattage": "Auto", "capacity": "2ml"},
    },
]


def seed_catalog(storage: MemStorage) -> None:
    for b in BRANDS:
        storage.create_brand(BrandCreate(**b))
    for c in CATEGORIES:
        storage.create_category(CategoryCreate(**c))
    for p in PRODUCTS:
        storage.create_product(ProductCreate(**p))
