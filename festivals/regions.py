# festivals/regions.py
# Country / collaborator-region names (English and Spanish) -> festival region

COLLABORATOR_REGIONS = {
    "Europa": "europe",
    "Norte América": "north-america",
    "Sur América": "south-america",
    "Asia": "asia",
    "África": "africa",
    "Oceanía": "oceania",
    "Medio Oriente": "middle-east",
}

COUNTRY_REGIONS = {
    # Asia
    "Corea del Sur": "asia",
    "Corea": "asia",
    "South Korea": "asia",
    "Korea": "asia",
    "Japón": "asia",
    "Japan": "asia",
    "China": "asia",
    "India": "asia",
    "Tailandia": "asia",
    "Thailand": "asia",
    "Singapur": "asia",
    "Singapore": "asia",
    "Filipinas": "asia",
    "Philippines": "asia",
    "Indonesia": "asia",
    "Malasia": "asia",
    "Malaysia": "asia",
    "Vietnam": "asia",
    "Taiwán": "asia",
    "Taiwan": "asia",
    "Hong Kong": "asia",
    # Europe
    "España": "europe",
    "Spain": "europe",
    "Francia": "europe",
    "France": "europe",
    "Italia": "europe",
    "Italy": "europe",
    "Alemania": "europe",
    "Germany": "europe",
    "Reino Unido": "europe",
    "United Kingdom": "europe",
    "UK": "europe",
    "Portugal": "europe",
    "Polonia": "europe",
    "Poland": "europe",
    "Grecia": "europe",
    "Greece": "europe",
    "Países Bajos": "europe",
    "Netherlands": "europe",
    "Bélgica": "europe",
    "Belgium": "europe",
    "Suiza": "europe",
    "Switzerland": "europe",
    "Austria": "europe",
    "Suecia": "europe",
    "Sweden": "europe",
    "Noruega": "europe",
    "Norway": "europe",
    "Dinamarca": "europe",
    "Denmark": "europe",
    "Finlandia": "europe",
    "Finland": "europe",
    # North America
    "Estados Unidos": "north-america",
    "United States": "north-america",
    "USA": "north-america",
    "US": "north-america",
    "Canadá": "north-america",
    "Canada": "north-america",
    "México": "north-america",
    "Mexico": "north-america",
    # South America
    "Argentina": "south-america",
    "Brasil": "south-america",
    "Brazil": "south-america",
    "Chile": "south-america",
    "Colombia": "south-america",
    "Perú": "south-america",
    "Peru": "south-america",
    "Uruguay": "south-america",
    "Venezuela": "south-america",
    "Ecuador": "south-america",
    "Paraguay": "south-america",
    "Bolivia": "south-america",
    # Africa
    "Sudáfrica": "africa",
    "South Africa": "africa",
    "Egipto": "africa",
    "Egypt": "africa",
    "Marruecos": "africa",
    "Morocco": "africa",
    "Nigeria": "africa",
    "Kenia": "africa",
    "Kenya": "africa",
    # Oceania
    "Australia": "oceania",
    "Nueva Zelanda": "oceania",
    "New Zealand": "oceania",
    # Middle East
    "Israel": "middle-east",
    "Turquía": "middle-east",
    "Turkey": "middle-east",
    "Emiratos Árabes Unidos": "middle-east",
    "United Arab Emirates": "middle-east",
    "UAE": "middle-east",
    "Arabia Saudí": "middle-east",
    "Saudi Arabia": "middle-east",
    "Irán": "middle-east",
    "Iran": "middle-east",
    "Líbano": "middle-east",
    "Lebanon": "middle-east",
}

REGIONS = {
    "europe",
    "north-america",
    "south-america",
    "asia",
    "africa",
    "oceania",
    "middle-east",
}


def festival_region(country_or_region):
    """Festival region of a country name or a collaborator region name, or None."""
    if not country_or_region:
        return None
    return COUNTRY_REGIONS.get(country_or_region) or COLLABORATOR_REGIONS.get(country_or_region)


def project_festival_region(project):
    """A project's own region when set, otherwise the region of its country."""
    region = project.get("region")
    if region in REGIONS:
        return region
    return festival_region(region) or festival_region(project.get("country"))
