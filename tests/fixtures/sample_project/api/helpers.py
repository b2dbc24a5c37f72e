def slug(value):
    return value.lower().replace(" ", "-")
