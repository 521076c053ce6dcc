from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import get_settings
from core.exceptions import register_exception_handlers
from core.query_logger import query_logger_instance
from app.startup import configure_logging, run_startup_checks

# ========== Catalog ==========
from modules.catalog.routes.catalog_routes import router as catalog_router

# ========== Orders ==========
from modules.orders.routes.order_routes import router as order_router
from modules.orders.routes.comment_routes import router as comment_router
from modules.orders.routes.work_item_routes import router as work_item_router

settings = get_settings()
configure_logging()

app = FastAPI(
    title="Cafe POS API",
    description="""
    Point-of-sale backend for a café.

    ## Features

    * **Catalog** - Item types and menu items with prices and preparation keys
    * **Orders** - Orders with line items, payment amounts and cup discounts
    * **Work Items** - Per line item preparation status for the counter
    * **Lifecycle** - Ready and served timestamps with undo
    * **Comments** - Notes from the cashier, master or serving staff
    """,
    version="1.0.0",
    debug=settings.debug,
)

# Register exception handlers for consistent error responses
register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(catalog_router)
app.include_router(order_router)
app.include_router(comment_router)
app.include_router(work_item_router)


@app.on_event("startup")
async def startup_event():
    """Initialize services on application startup"""
    run_startup_checks()


@app.on_event("shutdown")
async def shutdown_event():
    query_logger_instance.log_query_stats()


@app.get("/")
def read_root():
    return {"message": "Cafe POS backend is running"}
