def matches(breed, term):
    """True if term is a case-insensitive substring of the name or of any location."""
    needle = (term or "").lower()
    if needle in breed.name.lower():
        return True
    return any(isinstance(loc, str) and needle in loc.lower() for loc in breed.locations)


def filter_breeds(breeds, term):
    # Same record objects, same order; input is never modified.
    return [breed for breed in breeds if matches(breed, term)]
