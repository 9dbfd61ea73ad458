__title__ = "slicetree"
__version__ = "0.1.0"
__summary__ = "Slicetree - evaluate slicing tree floorplans into block placements"
__author__ = "Slicetree Developers"
__license__ = "MIT"
