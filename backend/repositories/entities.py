# Repositories for the entities that need no finders beyond plain CRUD
from models.game import Game
from models.grocery import Grocery
from models.hotel import Hotel
from models.restaurant import Restaurant
from models.song import Song
from models.ucsb_dining_commons import UCSBDiningCommons
from repositories.base import CrudRepository


class GameRepository(CrudRepository[Game]):
    model = Game


class GroceryRepository(CrudRepository[Grocery]):
    model = Grocery


class HotelRepository(CrudRepository[Hotel]):
    model = Hotel


class RestaurantRepository(CrudRepository[Restaurant]):
    model = Restaurant


class SongRepository(CrudRepository[Song]):
    model = Song


class UCSBDiningCommonsRepository(CrudRepository[UCSBDiningCommons]):
    model = UCSBDiningCommons
