class Coordinates():
    def __init__(self, x=0, y=0):
        self.x = x
        self.y = y

    def set(self, coordinates):
        self.x = coordinates.x
        self.y = coordinates.y

    def __eq__(self, other):
        if not isinstance(other, Coordinates):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __iter__(self):
        return iter((self.x, self.y))

    def __repr__(self):
        return 'Coordinates[x={}, y={}]'.format(self.x, self.y)


class Dimensions():
    def __init__(self, width=0, height=0):
        self.width = width
        self.height = height

    def set(self, dimensions):
        self.width = dimensions.width
        self.height = dimensions.height

    def __eq__(self, other):
        if not isinstance(other, Dimensions):
            return NotImplemented
        return self.width == other.width and self.height == other.height

    def __iter__(self):
        return iter((self.width, self.height))

    def __repr__(self):
        return 'Dimensions[width={}, height={}]'.format(
            self.width, self.height)
