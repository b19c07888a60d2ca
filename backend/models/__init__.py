from models.users import User
from models.game import Game
from models.grocery import Grocery
from models.hotel import Hotel
from models.restaurant import Restaurant
from models.song import Song
from models.ucsb_date import UCSBDate
from models.ucsb_dining_commons import UCSBDiningCommons

__all__ = [
    "User",
    "Game",
    "Grocery",
    "Hotel",
    "Restaurant",
    "Song",
    "UCSBDate",
    "UCSBDiningCommons",
]
