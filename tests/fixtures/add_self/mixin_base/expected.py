class Child(mixin(Base)):
    def bar(self):
        return foo()

    def baz(self):
        return self.bar()
