"""Small character, text-search, text-building and linked-list helpers."""