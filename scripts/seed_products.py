"""
Seed the products collection with the initial mineral catalog

Does nothing when the collection already holds products.

Usage:
    python scripts/seed_products.py
"""

import asyncio
import os
import sys

from dotenv import load_dotenv

load_dotenv()

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.config import config  # noqa: E402
from app.core.errors import ErrorResponse  # noqa: E402
from app.db.mongodb import PRODUCTS_COLLECTION, MongoConnectionManager  # noqa: E402
from app.repositories.product import ProductRepository  # noqa: E402
from app.schemas.product import ProductCreate  # noqa: E402
from app.utils.slug import derive_slug  # noqa: E402

PRODUCTS = [
    {
        "name": "Rock Phosphate",
        "description": "Rock Phosphate is a natural source of phosphorus, essential for plant growth and development. Our high-grade Rock Phosphate contains significant amounts of P2O5, making it ideal for fertilizer production and agricultural applications.",
        "category": "Phosphate Minerals",
        "specifications": {"P2O5 Content": "28%-30%", "Mesh Size": "180-200", "Moisture": "Max 2%"},
        "applications": ["Fertilizer Production", "Agricultural Use", "Animal Feed Supplement"],
        "featured": True,
    },
    {
        "name": "Talc or Soap Stone",
        "description": "Talc, also known as Soap Stone, is a soft mineral with excellent lubricating properties. Our premium Talc is widely used in cosmetics, pharmaceuticals, paper manufacturing, and as a filler in various industrial applications.",
        "category": "Industrial Minerals",
        "specifications": {"Whiteness": "90-95%", "Brightness": "85-90%", "Mesh Size": "200-325"},
        "applications": ["Cosmetics", "Pharmaceuticals", "Paper Manufacturing", "Plastics", "Paints"],
        "featured": True,
    },
    {
        "name": "Calcium Fluoride",
        "description": "Calcium Fluoride (CaF2) is a naturally occurring mineral with high purity. It is essential in the production of hydrofluoric acid, aluminum, and steel manufacturing. Our Calcium Fluoride meets international quality standards.",
        "category": "Fluoride Minerals",
        "specifications": {"CaF2 Content": "85-95%", "SiO2": "Max 5%", "Mesh Size": "100-200"},
        "applications": ["Steel Manufacturing", "Aluminum Production", "Hydrofluoric Acid Production", "Ceramics"],
        "featured": False,
    },
    {
        "name": "Calcium Carbonate",
        "description": "Calcium Carbonate is one of the most versatile industrial minerals. Our high-purity Calcium Carbonate is used extensively in paper, paint, plastic, rubber, and construction industries as a filler and extender.",
        "category": "Carbonate Minerals",
        "specifications": {"CaCO3 Content": "95-98%", "Brightness": "90-95%", "Mesh Size": "200-400"},
        "applications": ["Paper Industry", "Paints & Coatings", "Plastics", "Rubber", "Construction Materials"],
        "featured": True,
    },
    {
        "name": "Quartz",
        "description": "Quartz is one of the most abundant minerals on Earth. Our high-purity Quartz is used in glass manufacturing, electronics, ceramics, and as a raw material in various industrial processes requiring silica.",
        "category": "Silicate Minerals",
        "specifications": {"SiO2 Content": "98-99.5%", "Fe2O3": "Max 0.05%", "Mesh Size": "100-300"},
        "applications": ["Glass Manufacturing", "Electronics", "Ceramics", "Foundry", "Water Filtration"],
        "featured": False,
    },
    {
        "name": "Dolomite",
        "description": "Dolomite is a calcium magnesium carbonate mineral. Our Dolomite is used in steel production, glass manufacturing, agriculture, and construction. It provides both calcium and magnesium benefits.",
        "category": "Carbonate Minerals",
        "specifications": {"CaO": "30-32%", "MgO": "18-20%", "Mesh Size": "100-200"},
        "applications": ["Steel Production", "Glass Manufacturing", "Agriculture", "Construction", "Water Treatment"],
        "featured": False,
    },
    {
        "name": "Brite",
        "description": "Brite is a high-quality industrial mineral used as a filler and extender in various applications. Our Brite offers excellent brightness and whiteness properties, making it ideal for paper, paint, and plastic industries.",
        "category": "Industrial Minerals",
        "specifications": {"Brightness": "85-90%", "Whiteness": "90-95%", "Mesh Size": "200-325"},
        "applications": ["Paper Industry", "Paints", "Plastics", "Rubber"],
        "featured": False,
    },
    {
        "name": "Mica",
        "description": "Mica is a group of silicate minerals known for their excellent electrical insulation properties. Our Mica is used in electronics, construction, cosmetics, and as a filler in various industrial applications.",
        "category": "Silicate Minerals",
        "specifications": {"Muscovite Content": "90-95%", "Mesh Size": "20-200", "Moisture": "Max 1%"},
        "applications": ["Electronics", "Construction", "Cosmetics", "Paints", "Plastics"],
        "featured": False,
    },
]


async def seed() -> int:
    """Seed the database unless products already exist"""
    manager = MongoConnectionManager(config)
    try:
        database = await manager.ensure_connected()
        collection = database[PRODUCTS_COLLECTION]

        existing_count = await collection.count_documents({})
        if existing_count > 0:
            print(f"Found {existing_count} existing products. Nothing to seed.")
            return 0

        repository = ProductRepository(collection)
        for data in PRODUCTS:
            product = ProductCreate(**data)
            document = product.model_dump(by_alias=True)
            document["slug"] = derive_slug(product.name)
            await repository.create(document)

        print(f"Successfully seeded {len(PRODUCTS)} products.")
        return 0
    except ErrorResponse as e:
        print(f"Error seeding products: {e.message}")
        return 1
    finally:
        manager.close()


if __name__ == "__main__":
    sys.exit(asyncio.run(seed()))
