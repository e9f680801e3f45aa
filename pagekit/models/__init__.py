from .page import Page, STATUS_DRAFT, STATUS_PUBLISHED
from .redirect import Redirect
from .ui_string import UIString
