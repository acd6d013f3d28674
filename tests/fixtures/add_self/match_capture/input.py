class Parser:
    head = None
    tail = ()
    options = {}

    def parse(self, tokens):
        match tokens:
            case [head, *tail]:
                return head, tail
            case {"mode": mode, **options}:
                return mode, options
            case other:
                return other, head


class Reader(Parser):
    def read(self, value):
        return head, options
