class Box:
    def size(self):
        return size

    def resize(self, factor):
        return Box(size=size * factor)
