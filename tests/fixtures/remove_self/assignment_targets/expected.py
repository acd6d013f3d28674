class Counter:
    count = 0

    def bump(self):
        self.count = count + 1
        self.count += 1
        for self.count in range(3):
            pass
        del self.count
        return count
