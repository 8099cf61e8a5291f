# Known brands in match-precedence order. The first entry found in an item
# name wins, so "Nike x Jordan" resolves to "Nike".

POPULAR_BRANDS: tuple[str, ...] = (
    # Sneakers & sportswear
    "Nike",
    "Adidas",
    "Jordan",
    "New Balance",
    "Puma",
    "Reebok",
    "Asics",
    "Converse",
    "Vans",
    "Salomon",
    # Streetwear
    "Supreme",
    "Off-White",
    "Stüssy",
    "Stone Island",
    "Palace",
    "Carhartt",
    # Outdoor
    "The North Face",
    "Patagonia",
    "Arc'teryx",
    "Canada Goose",
    "Moncler",
    "Timberland",
    "Dr. Martens",
    "Birkenstock",
    # Classics & denim
    "Ralph Lauren",
    "Tommy Hilfiger",
    "Lacoste",
    "Levi's",
    "Diesel",
    # Luxury
    "Louis Vuitton",
    "Gucci",
    "Prada",
    "Balenciaga",
    "Dior",
    "Chanel",
    "Hermès",
    "Burberry",
    "Versace",
    # High street
    "Zara",
    "H&M",
    "Uniqlo",
    "Mango",
    # Electronics
    "Apple",
    "Samsung",
    "Sony",
    "Nintendo",
    "Microsoft",
    # Watches
    "Rolex",
    "Omega",
    "Casio",
    "Seiko",
    # Collectibles
    "Pokémon",
    "Pokemon",
    "Funko",
    "Lego",
)
