"""
Main API module for the Copenhagen Restaurant Explorer.

Responsibilities:
    - Expose REST endpoints for restaurants, reviews, bookmarks and user accounts
    - Protect every endpoint with HTTP Basic Authentication unless marked @public
    - Translate domain errors into HTTP status codes

Architecture:
    - App Factory pattern (create_app) for test isolation and DI.
    - Stores are injected (in-memory by default, PostgreSQL via env); managers
      hold the business rules; routes stay thin.
    - The auth gate is an application-wide dependency; the authenticated
      Principal is passed to handlers as an explicit parameter.

Public endpoints:
    GET  /health
    GET  /api/restaurant/filter
    GET  /api/restaurant/{restaurant_id}
    GET  /api/review/restaurant/{restaurant_id}
    POST /api/user/login
    POST /api/user/register
"""

import logging
from typing import Dict, List, Optional

from fastapi import Depends, FastAPI, Query, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from auth.config import CHALLENGE
from auth.dependencies import AuthGate, public
from auth.schemas import LoginResponse, Principal, UserLogin
from auth.service import Unauthenticated, login_user
from restaurant_explorer.config import settings
from restaurant_explorer.errors import ExplorerError
from restaurant_explorer.manager import (
    BookmarkManager,
    RestaurantManager,
    ReviewManager,
    UserManager,
)
from restaurant_explorer.models import (
    Bookmark,
    BookmarkIn,
    Message,
    PasswordUpdate,
    PriceRange,
    Restaurant,
    Review,
    ReviewIn,
    UserCreate,
    UserOut,
    UserUpdate,
)
from restaurant_explorer.storage.base import StorageError
from restaurant_explorer.storage.filters import RestaurantFilter
from restaurant_explorer.storage.storage_factory import Stores, get_stores


def create_app(stores: Optional[Stores] = None) -> FastAPI:
    """
    Factory function to build and configure a new FastAPI app instance.

    Args:
        stores (Optional[Stores]): Stores to wire in. When omitted, the backend
            is chosen from the environment (see storage_factory.get_stores).

    Returns:
        FastAPI: A fully configured application instance.

    Why an app factory?
        - Enables per-test isolation in pytest.
        - Encourages dependency injection and easy swapping of implementations.
        - Avoids accidental global state across workers/processes.
    """
    log = logging.getLogger("restaurant_explorer")

    # basic console logging (optional)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL, logging.INFO))

    # ----------------------------------------------------------------
    # Per-app instances (isolated for tests, swappable for production)
    # ----------------------------------------------------------------
    if stores is None:
        stores = get_stores()
    log.info("Restaurant Explorer stores: %s", type(stores.users).__name__)

    gate = AuthGate(stores.users)
    restaurant_manager = RestaurantManager(stores.restaurants)
    review_manager = ReviewManager(stores.reviews, stores.users, stores.restaurants)
    bookmark_manager = BookmarkManager(stores.bookmarks, stores.users, stores.restaurants)
    user_manager = UserManager(stores.users)

    app = FastAPI(
        title="Copenhagen Restaurant Explorer API",
        description="Restaurant listings, reviews and bookmarks with Basic Authentication",
        version="1.0.0",
        docs_url="/swagger",
        dependencies=[Depends(gate)],
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ----------------------------------------------------------------
    # Error translation
    # ----------------------------------------------------------------
    @app.exception_handler(Unauthenticated)
    def handle_unauthenticated(request: Request, exc: Unauthenticated) -> Response:
        return PlainTextResponse(exc.reason, status_code=status.HTTP_401_UNAUTHORIZED, headers=CHALLENGE)

    @app.exception_handler(ExplorerError)
    def handle_domain_error(request: Request, exc: ExplorerError) -> Response:
        return JSONResponse({"detail": exc.message}, status_code=exc.status_code)

    @app.exception_handler(StorageError)
    def handle_storage_error(request: Request, exc: StorageError) -> Response:
        log.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse({"detail": "Storage unavailable"}, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)

    # Health check
    @app.get("/health")
    @public
    def health() -> Dict[str, str]:
        return {"status": "ok"}

    # ----------------------------------------------------------------
    # Restaurants
    # ----------------------------------------------------------------
    @app.get("/api/restaurant/filter", response_model=List[Restaurant])
    @public
    def filter_restaurants(
        neighborhood: Optional[List[str]] = Query(None),
        cuisine: Optional[List[str]] = Query(None),
        price_range: Optional[List[PriceRange]] = Query(None, alias="priceRange"),
        dietary_options: Optional[List[str]] = Query(None, alias="dietaryOptions"),
    ) -> List[Restaurant]:
        """
        Filter restaurants. Repeat a parameter to OR its values
        (`?neighborhood=A&neighborhood=B`); different parameters are AND-ed.
        No parameters returns every restaurant.
        """
        criteria = RestaurantFilter.from_params(neighborhood, cuisine, price_range, dietary_options)
        return restaurant_manager.filter_restaurants(criteria)

    @app.get("/api/restaurant/{restaurant_id}", response_model=Restaurant)
    @public
    def get_restaurant(restaurant_id: int) -> Restaurant:
        return restaurant_manager.get_restaurant(restaurant_id)

    # ----------------------------------------------------------------
    # Reviews
    # ----------------------------------------------------------------
    @app.get("/api/review/restaurant/{restaurant_id}", response_model=List[Review])
    @public
    def get_reviews_for_restaurant(restaurant_id: int) -> List[Review]:
        return review_manager.reviews_for_restaurant(restaurant_id)

    @app.get("/api/review/user/{user_id}/restaurant/{restaurant_id}", response_model=Review)
    def get_user_review(user_id: int, restaurant_id: int) -> Review:
        return review_manager.user_review(user_id, restaurant_id)

    @app.post("/api/review", response_model=Review, status_code=status.HTTP_201_CREATED)
    def create_review(payload: ReviewIn, response: Response) -> Review:
        review = review_manager.create_review(payload)
        response.headers["Location"] = app.url_path_for(
            "get_user_review", user_id=str(review.user_id), restaurant_id=str(review.restaurant_id)
        )
        return review

    @app.put("/api/review", response_model=Review)
    def update_review(payload: ReviewIn) -> Review:
        return review_manager.update_review(payload)

    @app.delete(
        "/api/review/user/{user_id}/restaurant/{restaurant_id}",
        status_code=status.HTTP_204_NO_CONTENT,
    )
    def delete_review(user_id: int, restaurant_id: int) -> Response:
        review_manager.delete_review(user_id, restaurant_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    # ----------------------------------------------------------------
    # Bookmarks
    # ----------------------------------------------------------------
    @app.get("/api/bookmark/user/{user_id}/restaurants", response_model=List[Restaurant])
    def get_bookmarked_restaurants(user_id: int) -> List[Restaurant]:
        return bookmark_manager.bookmarked_restaurants(user_id)

    @app.get("/api/bookmark/check/{user_id}/{restaurant_id}")
    def is_bookmarked(user_id: int, restaurant_id: int) -> bool:
        return bookmark_manager.is_bookmarked(user_id, restaurant_id)

    @app.post("/api/bookmark", response_model=Bookmark, status_code=status.HTTP_201_CREATED)
    def add_bookmark(payload: BookmarkIn, response: Response) -> Bookmark:
        bookmark = bookmark_manager.add_bookmark(payload.user_id, payload.restaurant_id)
        response.headers["Location"] = app.url_path_for(
            "is_bookmarked", user_id=str(bookmark.user_id), restaurant_id=str(bookmark.restaurant_id)
        )
        return bookmark

    @app.delete("/api/bookmark/{user_id}/{restaurant_id}", status_code=status.HTTP_204_NO_CONTENT)
    def remove_bookmark(user_id: int, restaurant_id: int) -> Response:
        bookmark_manager.remove_bookmark(user_id, restaurant_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    # ----------------------------------------------------------------
    # Users
    # ----------------------------------------------------------------
    @app.get("/api/user/me", response_model=Principal)
    def who_am_i(principal: Principal = Depends(gate)) -> Principal:
        return principal

    @app.get("/api/user/{user_id}", response_model=UserOut)
    def get_user(user_id: int) -> UserOut:
        return UserOut.from_user(user_manager.get_user(user_id))

    @app.post("/api/user/login", response_model=LoginResponse)
    @public
    def login(payload: UserLogin) -> LoginResponse:
        """Verify credentials and return the Authorization header value to reuse."""
        return login_user(stores.users, payload.username, payload.password_hash)

    @app.post("/api/user/register", response_model=UserOut, status_code=status.HTTP_201_CREATED)
    @public
    def register(payload: UserCreate, response: Response) -> UserOut:
        user = user_manager.register(payload)
        response.headers["Location"] = app.url_path_for("get_user", user_id=str(user.user_id))
        return UserOut.from_user(user)

    @app.put("/api/user", response_model=UserOut)
    def update_user(payload: UserUpdate) -> UserOut:
        return UserOut.from_user(user_manager.update_user(payload))

    @app.put("/api/user/password", response_model=Message)
    def update_password(payload: PasswordUpdate) -> Message:
        user_manager.change_password(payload)
        return Message(message="Password updated successfully")

    @app.delete("/api/user/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_user(user_id: int) -> Response:
        user_manager.delete_user(user_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return app


# `uvicorn main:app --reload` and `from main import app` continue to work.
app = create_app()
