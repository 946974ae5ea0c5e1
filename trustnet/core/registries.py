PROP_REG = {}

def register(registry, name: str):
    """Decorator that files a class in ``registry`` under ``name``."""
    def deco(cls):
        registry[name] = cls
        return cls
    return deco
