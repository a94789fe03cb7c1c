from .link import LinkService
from .wiki import WikiService
