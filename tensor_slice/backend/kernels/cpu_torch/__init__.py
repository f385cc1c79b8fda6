from .slice import *
