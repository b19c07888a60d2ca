from repositories.base import CrudRepository
from repositories.users import UserRepository
from repositories.ucsb_dates import UCSBDateRepository
from repositories.entities import (
    GameRepository,
    GroceryRepository,
    HotelRepository,
    RestaurantRepository,
    SongRepository,
    UCSBDiningCommonsRepository,
)
