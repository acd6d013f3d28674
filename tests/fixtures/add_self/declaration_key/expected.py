class Box:
    def size(self):
        return self.size

    def resize(self, factor):
        return Box(size=self.size * factor)
