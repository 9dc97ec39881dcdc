from .builder import const_u32 as C
from .builder import alive as A
from .builder import neighbors as N

from .builder import gt as Gt
from .builder import gte as Gte
from .builder import lt as Lt
from .builder import lte as Lte
from .builder import equal as Eq
from .builder import and_ as And_
from .builder import or_ as Or_

from .builder import void as Void
from .builder import set_result as Set
from .builder import if_then_else as If
