"""
modules/tool_usage/destination_data.py
---------------------------------------
Curated destination data: real coordinates and per-person price tiers for
each travel style's outdoor / indoor / nightlife pools.

Every curated destination has 4 styles x 3 pools x 5 POIs.  The generic
DEFAULT_POOLS template has 3 POIs per pool and no coordinates (0, 0).
"""

from __future__ import annotations

from tripwise.schemas.itinerary import POI, PriceTiers


def _p(name, lat, lng, address, activity, duration, low, medium, high):
    """Convenience builder for catalog POI rows."""
    return POI(
        name=name, lat=lat, lng=lng, address=address,
        activity_label=activity, duration_hours=duration,
        price_tiers=PriceTiers(low=low, medium=medium, high=high),
    )


# key: lowercase name matched by substring containment in the requested name
CURATED_DESTINATIONS: dict[str, dict] = {
    "paris": {
        "center": (48.8566, 2.3522),
        "country": "France",
        "currency": "EUR",
        "timezone": "Europe/Paris",
        "pools": {
            "relax": {
                "outdoor": [
                    _p("Luxembourg Gardens", 48.8462, 2.3372, "Rue de Médicis, 75006 Paris", "Garden Stroll at Luxembourg", 3, 0, 15, 30),
                    _p("Tuileries Garden", 48.8634, 2.3275, "Place de la Concorde, 75001 Paris", "Picnic at Tuileries", 3, 20, 40, 80),
                    _p("Canal Saint-Martin", 48.8714, 2.3656, "Quai de Valmy, 75010 Paris", "Canal-side Walk", 2, 0, 10, 25),
                    _p("Parc des Buttes-Chaumont", 48.8809, 2.3825, "1 Rue Botzaris, 75019 Paris", "Park Relaxation", 3, 0, 10, 20),
                    _p("Seine River Banks", 48.8566, 2.3522, "Berges de Seine, Paris", "Seine Riverside Walk", 2, 0, 15, 35),
                ],
                "indoor": [
                    _p("Le Marais Hammam", 48.8566, 2.3592, "31 Rue des Rosiers, 75004 Paris", "Traditional Hammam Spa", 3, 40, 80, 150),
                    _p("Café de Flore", 48.8540, 2.3325, "172 Boulevard Saint-Germain, 75006 Paris", "Iconic Café Experience", 2, 15, 30, 60),
                    _p("Shakespeare and Company", 48.8526, 2.3471, "37 Rue de la Bûcherie, 75005 Paris", "Literary Bookstore Visit", 2, 0, 20, 50),
                    _p("Galeries Lafayette Rooftop", 48.8738, 2.3320, "40 Boulevard Haussmann, 75009 Paris", "Rooftop Relaxation", 2, 0, 25, 60),
                    _p("Palais Royal Gardens", 48.8636, 2.3370, "8 Rue de Montpensier, 75001 Paris", "Covered Garden Visit", 2, 0, 10, 25),
                ],
                "nightlife": [
                    _p("Seine River Cruise", 48.8584, 2.2945, "Port de la Bourdonnais, 75007 Paris", "Evening Seine Cruise", 2, 15, 45, 120),
                    _p("Eiffel Tower", 48.8584, 2.2945, "Champ de Mars, 75007 Paris", "Eiffel Tower at Night", 3, 25, 40, 100),
                    _p("Le Comptoir du Panthéon", 48.8462, 2.3462, "16 Rue Soufflot, 75005 Paris", "Evening Wine & Cheese", 2, 30, 60, 120),
                    _p("Montmartre", 48.8867, 2.3431, "Place du Tertre, 75018 Paris", "Sunset at Sacré-Cœur", 2, 0, 20, 50),
                    _p("Jazz Club Duc des Lombards", 48.8609, 2.3488, "42 Rue des Lombards, 75001 Paris", "Live Jazz Evening", 3, 25, 50, 100),
                ],
            },
            "adventure": {
                "outdoor": [
                    _p("Eiffel Tower Stairs", 48.8584, 2.2945, "Champ de Mars, 75007 Paris", "Climb the Eiffel Tower", 3, 15, 25, 50),
                    _p("Bois de Boulogne", 48.8621, 2.2517, "Route de Suresnes, 75016 Paris", "Cycling in Bois de Boulogne", 4, 15, 30, 60),
                    _p("Montmartre Hills", 48.8867, 2.3431, "Rue Lepic, 75018 Paris", "Montmartre Hill Climb", 3, 0, 15, 35),
                    _p("Seine River", 48.8566, 2.3522, "Port de la Bourdonnais, 75007 Paris", "Kayaking on the Seine", 3, 35, 60, 100),
                    _p("Catacombs Entrance", 48.8338, 2.3324, "1 Avenue du Colonel Henri Rol-Tanguy, 75014 Paris", "Catacombs Exploration", 2, 15, 30, 60),
                ],
                "indoor": [
                    _p("Arkose Nation", 48.8486, 2.3925, "85 Rue de Charenton, 75012 Paris", "Indoor Rock Climbing", 3, 20, 35, 60),
                    _p("Lock Academy Paris", 48.8697, 2.3490, "20 Rue Duperré, 75009 Paris", "Escape Room Adventure", 2, 25, 40, 70),
                    _p("Aquaboulevard", 48.8312, 2.2867, "4-6 Rue Louis Armand, 75015 Paris", "Water Park Adventure", 4, 25, 40, 70),
                    _p("Mk2 VR", 48.8423, 2.3730, "32 Quai de la Loire, 75019 Paris", "Virtual Reality Experience", 2, 20, 35, 60),
                    _p("Laser Game Evolution", 48.8844, 2.3390, "10 Rue de Steinkerque, 75018 Paris", "Laser Tag Battle", 2, 15, 25, 45),
                ],
                "nightlife": [
                    _p("Moulin Rouge Area", 48.8841, 2.3323, "82 Boulevard de Clichy, 75018 Paris", "Pigalle Night Walk", 2, 0, 30, 180),
                    _p("Rex Club", 48.8702, 2.3481, "5 Boulevard Poissonnière, 75002 Paris", "Underground Clubbing", 4, 15, 30, 60),
                    _p("Pont Alexandre III", 48.8637, 2.3136, "Pont Alexandre III, Paris", "Night Photography Walk", 2, 0, 40, 100),
                    _p("Le Baron", 48.8656, 2.3075, "6 Avenue Marceau, 75008 Paris", "Exclusive Nightclub", 4, 30, 80, 200),
                    _p("Batofar", 48.8341, 2.3760, "Port de la Gare, 75013 Paris", "Boat Party on Seine", 4, 15, 35, 80),
                ],
            },
            "cultural": {
                "outdoor": [
                    _p("Notre-Dame Cathedral", 48.8530, 2.3499, "6 Parvis Notre-Dame, 75004 Paris", "Notre-Dame Architecture Tour", 2, 0, 15, 45),
                    _p("Sacré-Cœur Basilica", 48.8867, 2.3431, "35 Rue du Chevalier de la Barre, 75018 Paris", "Sacré-Cœur Visit", 3, 0, 10, 30),
                    _p("Le Marais District", 48.8566, 2.3592, "Rue des Francs Bourgeois, 75003 Paris", "Historic Le Marais Walk", 3, 0, 25, 60),
                    _p("Père Lachaise Cemetery", 48.8614, 2.3936, "16 Rue du Repos, 75020 Paris", "Famous Graves Tour", 3, 0, 20, 50),
                    _p("Latin Quarter", 48.8505, 2.3470, "Rue de la Huchette, 75005 Paris", "Latin Quarter History Walk", 2, 0, 20, 45),
                ],
                "indoor": [
                    _p("Louvre Museum", 48.8606, 2.3376, "Rue de Rivoli, 75001 Paris", "Louvre Masterpieces Tour", 4, 17, 35, 80),
                    _p("Musée d'Orsay", 48.8600, 2.3266, "1 Rue de la Légion d'Honneur, 75007 Paris", "Impressionist Art Tour", 3, 16, 30, 70),
                    _p("Palace of Versailles", 48.8049, 2.1204, "Place d'Armes, 78000 Versailles", "Versailles Palace Tour", 5, 20, 45, 120),
                    _p("Centre Pompidou", 48.8607, 2.3524, "Place Georges-Pompidou, 75004 Paris", "Modern Art Experience", 3, 15, 30, 60),
                    _p("Opéra Garnier", 48.8720, 2.3316, "Place de l'Opéra, 75009 Paris", "Opera House Tour", 2, 14, 25, 55),
                ],
                "nightlife": [
                    _p("Opéra Garnier", 48.8720, 2.3316, "Place de l'Opéra, 75009 Paris", "Evening Opera Performance", 3, 40, 120, 350),
                    _p("Moulin Rouge", 48.8841, 2.3323, "82 Boulevard de Clichy, 75018 Paris", "Moulin Rouge Show", 3, 90, 150, 300),
                    _p("Crazy Horse", 48.8656, 2.3055, "12 Avenue George V, 75008 Paris", "Cabaret Experience", 2, 80, 140, 280),
                    _p("Lido de Paris", 48.8688, 2.3069, "116 Avenue des Champs-Élysées, 75008 Paris", "Dinner Show", 3, 100, 180, 350),
                    _p("Comédie-Française", 48.8636, 2.3370, "Place Colette, 75001 Paris", "French Theater Night", 3, 30, 60, 120),
                ],
            },
            "food": {
                "outdoor": [
                    _p("Marché Bastille", 48.8533, 2.3692, "Boulevard Richard-Lenoir, 75011 Paris", "Bastille Market Tour", 3, 20, 50, 100),
                    _p("Rue Mouffetard", 48.8425, 2.3499, "Rue Mouffetard, 75005 Paris", "Street Food Safari", 3, 25, 50, 100),
                    _p("Champagne Region", 49.2583, 4.0317, "Avenue de Champagne, 51200 Épernay", "Champagne Vineyard Tour", 6, 80, 150, 300),
                    _p("Marché d'Aligre", 48.8486, 2.3789, "Place d'Aligre, 75012 Paris", "Local Market Experience", 2, 15, 35, 70),
                    _p("Seine River Cruise", 48.8584, 2.2945, "Port de la Bourdonnais, 75007 Paris", "Lunch Cruise on Seine", 3, 50, 100, 200),
                ],
                "indoor": [
                    _p("Le Cordon Bleu", 48.8492, 2.3046, "13-15 Quai André Citroën, 75015 Paris", "French Cooking Class", 4, 80, 150, 300),
                    _p("Le Jules Verne", 48.8584, 2.2945, "Eiffel Tower, 75007 Paris", "Fine Dining at Eiffel Tower", 3, 150, 250, 450),
                    _p("Cave des Abbesses", 48.8842, 2.3389, "43 Rue des Abbesses, 75018 Paris", "Wine Tasting Session", 2, 30, 60, 120),
                    _p("Jacques Genin", 48.8612, 2.3607, "133 Rue de Turenne, 75003 Paris", "Chocolate Workshop", 2, 40, 80, 150),
                    _p("Café Verlet", 48.8631, 2.3391, "256 Rue Saint-Honoré, 75001 Paris", "Coffee Roasting Tour", 2, 20, 40, 80),
                ],
                "nightlife": [
                    _p("Le Train Bleu", 48.8449, 2.3737, "Gare de Lyon, 75012 Paris", "Belle Époque Dinner", 3, 60, 120, 220),
                    _p("Pink Mamma", 48.8633, 2.3800, "20 bis Rue de Douai, 75009 Paris", "Italian Feast", 2, 35, 60, 110),
                    _p("Septime", 48.8533, 2.3780, "80 Rue de Charonne, 75011 Paris", "Michelin Star Tasting", 3, 100, 180, 350),
                    _p("Wine Bar Le Baron Rouge", 48.8486, 2.3789, "1 Rue Théophile Roussel, 75012 Paris", "Natural Wine Evening", 2, 25, 50, 100),
                    _p("Bouillon Chartier", 48.8748, 2.3425, "7 Rue du Faubourg Montmartre, 75009 Paris", "Historic Bistro Dinner", 2, 20, 35, 60),
                ],
            },
        },
    },
    "tokyo": {
        "center": (35.6762, 139.6503),
        "country": "Japan",
        "currency": "JPY",
        "timezone": "Asia/Tokyo",
        "pools": {
            "relax": {
                "outdoor": [
                    _p("Shinjuku Gyoen", 35.6852, 139.7100, "11 Naitomachi, Shinjuku City, Tokyo", "Garden Meditation Walk", 3, 5, 10, 25),
                    _p("Ueno Park", 35.7146, 139.7732, "Uenokoen, Taito City, Tokyo", "Cherry Blossom Viewing", 3, 0, 15, 40),
                    _p("Odaiba Beach", 35.6267, 139.7756, "Daiba, Minato City, Tokyo", "Seaside Relaxation", 3, 0, 20, 50),
                    _p("Meiji Shrine Gardens", 35.6764, 139.6993, "1-1 Yoyogikamizonocho, Shibuya City, Tokyo", "Sacred Forest Walk", 2, 0, 10, 25),
                    _p("Sumida River", 35.7100, 139.8107, "Sumida River, Tokyo", "River Cruise", 2, 10, 25, 50),
                ],
                "indoor": [
                    _p("Oedo Onsen Monogatari", 35.6184, 139.7695, "2-6-3 Aomi, Koto City, Tokyo", "Traditional Onsen Experience", 4, 25, 45, 100),
                    _p("Cat Cafe Mocha", 35.6595, 139.7005, "1-19-14 Jinnan, Shibuya City, Tokyo", "Cat Café Relaxation", 2, 12, 20, 35),
                    _p("Park Hyatt Spa", 35.6856, 139.6907, "3-7-1-2 Nishi-Shinjuku, Shinjuku City, Tokyo", "Luxury Spa Treatment", 3, 80, 150, 300),
                    _p("Tsutaya Books", 35.6604, 139.6984, "17-5 Sarugakucho, Shibuya City, Tokyo", "Design Bookstore Visit", 2, 0, 20, 50),
                    _p("Aman Tokyo", 35.6857, 139.7634, "The Otemachi Tower, Tokyo", "Zen Meditation Session", 2, 50, 100, 200),
                ],
                "nightlife": [
                    _p("Tokyo Tower", 35.6586, 139.7454, "4-2-8 Shibakoen, Minato City, Tokyo", "Night Tower Views", 2, 10, 20, 40),
                    _p("Odaiba", 35.6267, 139.7756, "Daiba, Minato City, Tokyo", "Rainbow Bridge Night Walk", 2, 0, 20, 50),
                    _p("Roppongi Hills", 35.6605, 139.7292, "6-10-1 Roppongi, Minato City, Tokyo", "Sky Deck Night Views", 2, 15, 25, 50),
                    _p("Yakatabune Boat", 35.6267, 139.7756, "Tokyo Bay", "Traditional Boat Dinner", 3, 60, 120, 200),
                    _p("Bar High Five", 35.6712, 139.7630, "4-2 Ginza, Chuo City, Tokyo", "World-Class Cocktails", 2, 40, 80, 150),
                ],
            },
            "adventure": {
                "outdoor": [
                    _p("Mount Takao", 35.6251, 139.2436, "Takaomachi, Hachioji, Tokyo", "Mountain Hiking", 5, 10, 25, 60),
                    _p("Tokyo Bay", 35.6267, 139.7756, "Tokyo Bay Area", "Kayaking Adventure", 3, 40, 70, 120),
                    _p("Shibuya Crossing", 35.6595, 139.7004, "Shibuya Crossing, Tokyo", "Urban Photography Walk", 2, 0, 30, 80),
                    _p("Asakusa", 35.7148, 139.7967, "Asakusa, Taito City, Tokyo", "Rickshaw Tour", 2, 30, 60, 100),
                    _p("Imperial Palace", 35.6852, 139.7528, "1-1 Chiyoda, Chiyoda City, Tokyo", "Palace Running Course", 2, 0, 15, 40),
                ],
                "indoor": [
                    _p("B-Pump Tokyo", 35.7071, 139.6499, "2-9-1 Honmachi, Shibuya City, Tokyo", "Indoor Bouldering", 3, 20, 35, 60),
                    _p("Real Escape Game", 35.6595, 139.7004, "Shibuya, Tokyo", "Escape Room Challenge", 2, 25, 40, 70),
                    _p("VR Zone Shinjuku", 35.6938, 139.7034, "3-29-1 Kabukicho, Shinjuku City, Tokyo", "VR Gaming Experience", 3, 30, 50, 90),
                    _p("Round1 Stadium", 35.6612, 139.6984, "Shibuya, Tokyo", "Arcade Gaming Marathon", 3, 20, 40, 80),
                    _p("teamLab Borderless", 35.6267, 139.7756, "Odaiba, Tokyo", "Digital Art Adventure", 3, 25, 35, 60),
                ],
                "nightlife": [
                    _p("Robot Restaurant", 35.6938, 139.7034, "Kabukicho, Shinjuku City, Tokyo", "Robot Show Experience", 2, 60, 90, 150),
                    _p("Golden Gai", 35.6938, 139.7034, "Kabukicho, Shinjuku City, Tokyo", "Bar Hopping Adventure", 3, 30, 60, 120),
                    _p("Womb Club", 35.6595, 139.6984, "Maruyamacho, Shibuya City, Tokyo", "Techno Clubbing", 4, 25, 45, 80),
                    _p("Shibuya Sky", 35.6595, 139.7004, "Shibuya Scramble Square, Tokyo", "Night Observation Deck", 2, 20, 25, 40),
                    _p("Ageha", 35.6267, 139.8107, "Koto City, Tokyo", "Mega Club Experience", 5, 35, 60, 100),
                ],
            },
            "cultural": {
                "outdoor": [
                    _p("Senso-ji Temple", 35.7148, 139.7967, "2-3-1 Asakusa, Taito City, Tokyo", "Ancient Temple Visit", 3, 0, 15, 40),
                    _p("Meiji Shrine", 35.6764, 139.6993, "1-1 Yoyogikamizonocho, Shibuya City, Tokyo", "Shinto Shrine Experience", 2, 0, 10, 30),
                    _p("Harajuku", 35.6702, 139.7027, "Harajuku, Shibuya City, Tokyo", "Japanese Fashion Tour", 3, 0, 30, 80),
                    _p("Yanaka District", 35.7246, 139.7662, "Yanaka, Taito City, Tokyo", "Old Tokyo Walking Tour", 3, 0, 25, 60),
                    _p("Tsukiji Outer Market", 35.6654, 139.7707, "4-16-2 Tsukiji, Chuo City, Tokyo", "Fish Market Culture", 2, 15, 40, 80),
                ],
                "indoor": [
                    _p("Tokyo National Museum", 35.7189, 139.7765, "13-9 Uenokoen, Taito City, Tokyo", "Japanese Art & History", 4, 10, 20, 50),
                    _p("Edo-Tokyo Museum", 35.6966, 139.7963, "1-4-1 Yokoami, Sumida City, Tokyo", "Edo Period Exhibition", 3, 10, 20, 45),
                    _p("Kabuki-za Theatre", 35.6693, 139.7679, "4-12-15 Ginza, Chuo City, Tokyo", "Kabuki Performance", 4, 25, 60, 150),
                    _p("Mori Art Museum", 35.6605, 139.7292, "6-10-1 Roppongi, Minato City, Tokyo", "Contemporary Art Tour", 3, 15, 25, 50),
                    _p("Sumo Museum", 35.6966, 139.7933, "1-3-28 Yokoami, Sumida City, Tokyo", "Sumo Culture Experience", 2, 0, 15, 35),
                ],
                "nightlife": [
                    _p("Kabuki-za Theatre", 35.6693, 139.7679, "4-12-15 Ginza, Chuo City, Tokyo", "Evening Kabuki Show", 3, 40, 100, 200),
                    _p("Geisha District", 35.7148, 139.7967, "Asakusa, Tokyo", "Geisha Entertainment", 3, 100, 200, 400),
                    _p("Sumo Stable", 35.6966, 139.7933, "Ryogoku, Tokyo", "Sumo Dinner Experience", 3, 60, 120, 250),
                    _p("National Theatre", 35.6852, 139.7528, "Hayabusacho, Chiyoda City, Tokyo", "Traditional Arts Night", 3, 35, 70, 150),
                    _p("Tokyo Dome", 35.7056, 139.7519, "1-3-61 Koraku, Bunkyo City, Tokyo", "Baseball Night", 3, 30, 60, 150),
                ],
            },
            "food": {
                "outdoor": [
                    _p("Tsukiji Outer Market", 35.6654, 139.7707, "4-16-2 Tsukiji, Chuo City, Tokyo", "Fish Market Food Tour", 3, 30, 60, 120),
                    _p("Ameya-Yokocho", 35.7100, 139.7747, "Ueno, Taito City, Tokyo", "Street Food Adventure", 3, 20, 40, 80),
                    _p("Yanaka Ginza", 35.7246, 139.7662, "Yanaka, Taito City, Tokyo", "Traditional Snack Walk", 2, 15, 30, 60),
                    _p("Omoide Yokocho", 35.6938, 139.6997, "Nishishinjuku, Shinjuku City, Tokyo", "Yakitori Alley Experience", 3, 20, 40, 80),
                    _p("Depachika Food Halls", 35.6812, 139.7671, "Various Department Stores, Tokyo", "Department Store Food Tour", 2, 25, 50, 100),
                ],
                "indoor": [
                    _p("ABC Cooking Studio", 35.6595, 139.7004, "Shibuya, Tokyo", "Japanese Cooking Class", 3, 50, 80, 150),
                    _p("Sukiyabashi Jiro", 35.6712, 139.7630, "4-2-15 Ginza, Chuo City, Tokyo", "Legendary Sushi Experience", 2, 250, 350, 500),
                    _p("Sake Plaza", 35.6668, 139.7628, "1-1-21 Nishi-Shimbashi, Minato City, Tokyo", "Sake Tasting Session", 2, 20, 40, 80),
                    _p("Shiroi Koibito Park", 35.6762, 139.7002, "Tokyo Branch", "Chocolate Making Class", 2, 30, 50, 90),
                    _p("Blue Bottle Coffee", 35.6570, 139.7035, "Nakameguro, Tokyo", "Coffee Brewing Workshop", 2, 15, 30, 60),
                ],
                "nightlife": [
                    _p("Izakaya Alley", 35.6938, 139.7034, "Shinjuku, Tokyo", "Izakaya Hopping", 3, 30, 60, 120),
                    _p("Ramen Street", 35.6812, 139.7671, "Tokyo Station, Tokyo", "Late Night Ramen", 2, 12, 20, 40),
                    _p("Ginza Sushi", 35.6712, 139.7630, "Ginza, Chuo City, Tokyo", "Omakase Dinner", 3, 100, 200, 400),
                    _p("Whisky Bar Zoetrope", 35.6938, 139.7034, "Shinjuku, Tokyo", "Japanese Whisky Tasting", 2, 40, 80, 160),
                    _p("Kagari", 35.6712, 139.7630, "Ginza, Tokyo", "Michelin Ramen Experience", 2, 15, 25, 45),
                ],
            },
        },
    },
    "new york": {
        "center": (40.7128, -74.0060),
        "country": "USA",
        "currency": "USD",
        "timezone": "America/New_York",
        "pools": {
            "relax": {
                "outdoor": [
                    _p("Central Park", 40.7829, -73.9654, "Central Park, New York, NY", "Central Park Stroll", 4, 0, 20, 60),
                    _p("High Line", 40.7480, -74.0048, "High Line, New York, NY", "Elevated Park Walk", 2, 0, 15, 40),
                    _p("Brooklyn Bridge Park", 40.7024, -73.9963, "Brooklyn Bridge Park, Brooklyn, NY", "Waterfront Relaxation", 3, 0, 15, 40),
                    _p("Hudson River Park", 40.7316, -74.0108, "Hudson River Park, New York, NY", "River Park Sunset", 2, 0, 10, 30),
                    _p("The Battery", 40.7033, -74.0170, "The Battery, New York, NY", "Harbor Garden Visit", 2, 0, 10, 25),
                ],
                "indoor": [
                    _p("Aire Ancient Baths", 40.7209, -74.0009, "88 Franklin St, New York, NY", "Roman Bath Experience", 3, 80, 130, 220),
                    _p("McNally Jackson Books", 40.7236, -73.9965, "52 Prince St, New York, NY", "Bookstore Browsing", 2, 0, 20, 50),
                    _p("Russian & Turkish Baths", 40.7281, -73.9829, "268 E 10th St, New York, NY", "Traditional Baths", 3, 40, 60, 100),
                    _p("The Strand", 40.7333, -73.9910, "828 Broadway, New York, NY", "Iconic Bookstore Visit", 2, 0, 25, 60),
                    _p("MNDFL Meditation", 40.7336, -73.9943, "10 E 14th St, New York, NY", "Guided Meditation", 2, 20, 35, 60),
                ],
                "nightlife": [
                    _p("Top of the Rock", 40.7587, -73.9787, "30 Rockefeller Plaza, New York, NY", "Night City Views", 2, 40, 45, 70),
                    _p("Jazz at Lincoln Center", 40.7687, -73.9832, "10 Columbus Circle, New York, NY", "Evening Jazz Concert", 3, 35, 75, 150),
                    _p("Rooftop Bar 230 Fifth", 40.7442, -73.9879, "230 5th Ave, New York, NY", "Rooftop Drinks", 2, 30, 60, 120),
                    _p("Brooklyn Bridge", 40.7061, -73.9969, "Brooklyn Bridge, New York, NY", "Night Bridge Walk", 2, 0, 15, 40),
                    _p("DUMBO", 40.7033, -73.9883, "DUMBO, Brooklyn, NY", "Brooklyn Waterfront Evening", 2, 0, 25, 60),
                ],
            },
            "adventure": {
                "outdoor": [
                    _p("Brooklyn Bridge", 40.7061, -73.9969, "Brooklyn Bridge, New York, NY", "Bridge Walk Adventure", 2, 0, 20, 50),
                    _p("Hudson River", 40.7456, -74.0089, "Pier 40, New York, NY", "Kayaking Hudson River", 3, 40, 70, 120),
                    _p("Governors Island", 40.6892, -74.0167, "Governors Island, New York, NY", "Island Cycling", 4, 15, 30, 60),
                    _p("Statue of Liberty", 40.6892, -74.0445, "Liberty Island, New York, NY", "Crown Climb", 4, 24, 35, 70),
                    _p("Central Park", 40.7829, -73.9654, "Central Park, New York, NY", "Rowboat Adventure", 2, 20, 35, 60),
                ],
                "indoor": [
                    _p("Brooklyn Boulders", 40.6782, -73.9442, "575 Degraw St, Brooklyn, NY", "Indoor Rock Climbing", 3, 35, 50, 80),
                    _p("Mission Escape", 40.7527, -73.9772, "265 W 37th St, New York, NY", "Escape Room Challenge", 2, 35, 50, 80),
                    _p("Sky Zone", 40.8568, -73.8438, "Bronx, NY", "Trampoline Park", 2, 25, 40, 60),
                    _p("VR World NYC", 40.7505, -73.9934, "4 E 34th St, New York, NY", "Virtual Reality Gaming", 2, 35, 55, 90),
                    _p("RPM Raceway", 40.8176, -73.9166, "99 Caven Point Rd, Jersey City, NJ", "Indoor Go-Kart Racing", 2, 30, 50, 80),
                ],
                "nightlife": [
                    _p("Edge Observation Deck", 40.7538, -74.0014, "30 Hudson Yards, New York, NY", "Night Sky Deck", 2, 38, 45, 80),
                    _p("Output Brooklyn", 40.7214, -73.9579, "Williamsburg, Brooklyn, NY", "Rooftop Club Night", 4, 25, 50, 100),
                    _p("Sleep No More", 40.7505, -74.0065, "530 W 27th St, New York, NY", "Immersive Theater", 3, 100, 140, 200),
                    _p("House of Yes", 40.7049, -73.9228, "2 Wyckoff Ave, Brooklyn, NY", "Performance Club Night", 4, 20, 40, 80),
                    _p("Please Don't Tell", 40.7265, -73.9838, "113 St Marks Pl, New York, NY", "Speakeasy Experience", 2, 40, 70, 120),
                ],
            },
            "cultural": {
                "outdoor": [
                    _p("Times Square", 40.7580, -73.9855, "Times Square, New York, NY", "Broadway District Walk", 2, 0, 20, 50),
                    _p("SoHo", 40.7233, -74.0030, "SoHo, New York, NY", "Art Gallery Hopping", 3, 0, 30, 80),
                    _p("Greenwich Village", 40.7336, -74.0027, "Greenwich Village, New York, NY", "Historic Village Tour", 3, 0, 30, 70),
                    _p("Harlem", 40.8116, -73.9465, "Harlem, New York, NY", "Harlem Renaissance Walk", 3, 0, 35, 80),
                    _p("Little Italy", 40.7191, -73.9973, "Little Italy, New York, NY", "Immigrant Heritage Tour", 2, 0, 25, 60),
                ],
                "indoor": [
                    _p("Metropolitan Museum", 40.7794, -73.9632, "1000 5th Ave, New York, NY", "Met Museum Tour", 4, 25, 40, 80),
                    _p("MoMA", 40.7614, -73.9776, "11 W 53rd St, New York, NY", "Modern Art Experience", 3, 25, 35, 60),
                    _p("American Museum of Natural History", 40.7813, -73.9740, "200 Central Park West, New York, NY", "Natural History Tour", 4, 23, 35, 60),
                    _p("Broadway Theater", 40.7590, -73.9845, "Broadway, New York, NY", "Broadway Show", 3, 80, 150, 350),
                    _p("Guggenheim Museum", 40.7830, -73.9590, "1071 5th Ave, New York, NY", "Spiral Art Tour", 3, 25, 35, 60),
                ],
                "nightlife": [
                    _p("Broadway", 40.7590, -73.9845, "Broadway, New York, NY", "Evening Broadway Show", 3, 100, 200, 450),
                    _p("Blue Note Jazz Club", 40.7308, -74.0006, "131 W 3rd St, New York, NY", "Live Jazz Performance", 3, 35, 75, 150),
                    _p("Carnegie Hall", 40.7651, -73.9799, "881 7th Ave, New York, NY", "Classical Concert", 3, 40, 100, 250),
                    _p("Comedy Cellar", 40.7303, -74.0003, "117 MacDougal St, New York, NY", "Stand-Up Comedy Night", 2, 25, 40, 75),
                    _p("Apollo Theater", 40.8100, -73.9500, "253 W 125th St, New York, NY", "Harlem Music Night", 3, 35, 65, 130),
                ],
            },
            "food": {
                "outdoor": [
                    _p("Smorgasburg", 40.7214, -73.9579, "Williamsburg, Brooklyn, NY", "Food Market Festival", 3, 25, 50, 100),
                    _p("Chinatown", 40.7158, -73.9970, "Chinatown, New York, NY", "Chinatown Food Tour", 3, 20, 45, 90),
                    _p("Chelsea Market", 40.7424, -74.0061, "75 9th Ave, New York, NY", "Market Exploration", 2, 25, 50, 100),
                    _p("Finger Lakes", 42.5400, -76.9000, "Finger Lakes Region, NY", "Vineyard Day Trip", 8, 100, 200, 400),
                    _p("Jackson Heights", 40.7557, -73.8831, "Jackson Heights, Queens, NY", "Multi-Cultural Food Safari", 3, 20, 45, 90),
                ],
                "indoor": [
                    _p("Institute of Culinary Education", 40.7459, -74.0077, "225 Liberty St, New York, NY", "NYC Cooking Class", 4, 100, 180, 300),
                    _p("Le Bernardin", 40.7614, -73.9817, "155 W 51st St, New York, NY", "Michelin Star Dining", 3, 180, 280, 450),
                    _p("Eataly NYC", 40.7421, -73.9893, "200 5th Ave, New York, NY", "Italian Food Hall Tour", 2, 30, 60, 120),
                    _p("Li-Lac Chocolates", 40.7340, -74.0027, "40 8th Ave, New York, NY", "Chocolate Making Class", 2, 45, 75, 130),
                    _p("La Colombe", 40.7234, -73.9989, "270 Lafayette St, New York, NY", "Coffee Roasting Tour", 2, 15, 30, 60),
                ],
                "nightlife": [
                    _p("Katz's Delicatessen", 40.7223, -73.9874, "205 E Houston St, New York, NY", "Late Night Deli", 2, 25, 40, 70),
                    _p("Eleven Madison Park", 40.7417, -73.9867, "11 Madison Ave, New York, NY", "Fine Dining Experience", 3, 250, 350, 500),
                    _p("Balthazar", 40.7234, -73.9978, "80 Spring St, New York, NY", "French Bistro Dinner", 2, 60, 100, 180),
                    _p("Dead Rabbit", 40.7033, -74.0100, "30 Water St, New York, NY", "Award-Winning Cocktails", 2, 40, 70, 130),
                    _p("Joe's Pizza", 40.7336, -74.0027, "7 Carmine St, New York, NY", "Iconic NYC Pizza", 1, 8, 15, 30),
                ],
            },
        },
    },
    "london": {
        "center": (51.5074, -0.1278),
        "country": "United Kingdom",
        "currency": "GBP",
        "timezone": "Europe/London",
        "pools": {
            "relax": {
                "outdoor": [
                    _p("Hyde Park", 51.5073, -0.1657, "Hyde Park, London", "Royal Park Stroll", 3, 0, 15, 40),
                    _p("Regent's Park", 51.5313, -0.1570, "Regent's Park, London", "Rose Garden Visit", 3, 0, 15, 35),
                    _p("Hampstead Heath", 51.5606, -0.1636, "Hampstead Heath, London", "Heath Walking", 4, 0, 15, 40),
                    _p("Kew Gardens", 51.4787, -0.2956, "Royal Botanic Gardens, Kew, London", "Botanical Gardens", 4, 20, 25, 50),
                    _p("South Bank", 51.5055, -0.1147, "South Bank, London", "Thames Riverside Walk", 2, 0, 15, 35),
                ],
                "indoor": [
                    _p("ESPA Life at Corinthia", 51.5073, -0.1234, "Whitehall Place, London", "Luxury Spa Day", 4, 150, 250, 450),
                    _p("Daunt Books", 51.5210, -0.1536, "83 Marylebone High St, London", "Historic Bookshop Visit", 2, 0, 20, 50),
                    _p("Fortnum & Mason's", 51.5088, -0.1375, "181 Piccadilly, London", "Afternoon Tea", 3, 50, 80, 150),
                    _p("Porchester Spa", 51.5178, -0.1881, "Queensway, London", "Turkish Bath Experience", 3, 35, 50, 90),
                    _p("The Wolseley", 51.5073, -0.1413, "160 Piccadilly, London", "Grand Café Experience", 2, 40, 70, 130),
                ],
                "nightlife": [
                    _p("Sky Garden", 51.5113, -0.0836, "20 Fenchurch St, London", "Night City Views", 2, 0, 30, 80),
                    _p("Ronnie Scott's", 51.5134, -0.1326, "47 Frith St, London", "Live Jazz Evening", 3, 40, 70, 130),
                    _p("Nightjar", 51.5269, -0.0879, "129 City Rd, London", "Speakeasy Cocktails", 2, 35, 60, 110),
                    _p("Thames Path", 51.5055, -0.1147, "South Bank, London", "Night Thames Walk", 2, 0, 15, 40),
                    _p("Sketch", 51.5126, -0.1424, "9 Conduit St, London", "Art Gallery Bar", 2, 45, 80, 150),
                ],
            },
            "adventure": {
                "outdoor": [
                    _p("The O2", 51.5033, 0.0032, "Peninsula Square, London", "O2 Roof Walk", 2, 35, 45, 75),
                    _p("Lee Valley", 51.6069, -0.0366, "Lee Valley, London", "White Water Rafting", 3, 50, 70, 110),
                    _p("Thames", 51.5074, -0.1278, "Thames River, London", "Thames RIB Speedboat", 2, 45, 65, 100),
                    _p("Richmond Park", 51.4429, -0.2745, "Richmond Park, London", "Deer Park Cycling", 4, 15, 30, 60),
                    _p("ArcelorMittal Orbit", 51.5385, -0.0134, "Queen Elizabeth Olympic Park, London", "Orbit Slide", 2, 20, 30, 50),
                ],
                "indoor": [
                    _p("The Castle Climbing Centre", 51.5625, -0.0821, "Green Lanes, London", "Indoor Rock Climbing", 3, 20, 35, 60),
                    _p("clueQuest", 51.5313, -0.1094, "169-171 Caledonian Rd, King's Cross, London", "Escape Room Mission", 2, 30, 45, 75),
                    _p("Oxygen Freejumping", 51.4987, -0.0247, "Greenwich, London", "Trampoline Park", 2, 15, 25, 45),
                    _p("DNA VR", 51.5250, -0.0757, "95 Aldgate High St, London", "VR Gaming Experience", 2, 25, 40, 70),
                    _p("TeamSport Karting", 51.5074, -0.0899, "Tower Bridge, London", "Indoor Go-Karting", 2, 35, 55, 90),
                ],
                "nightlife": [
                    _p("Fabric", 51.5204, -0.1033, "77A Charterhouse St, London", "Legendary Club Night", 5, 20, 35, 60),
                    _p("Ministry of Sound", 51.4977, -0.0984, "103 Gaunt St, London", "Electronic Music Night", 5, 25, 40, 70),
                    _p("Printworks", 51.4976, -0.0254, "Surrey Quays Rd, London", "Industrial Venue Party", 4, 25, 45, 80),
                    _p("Shard", 51.5045, -0.0865, "32 London Bridge St, London", "Night Views from The Shard", 2, 35, 45, 80),
                    _p("XOYO", 51.5269, -0.0823, "32-37 Cowper St, London", "Live Music & DJs", 4, 15, 25, 50),
                ],
            },
            "cultural": {
                "outdoor": [
                    _p("Tower of London", 51.5081, -0.0759, "Tower of London, London", "Historic Tower Visit", 4, 30, 40, 70),
                    _p("Westminster Abbey", 51.4994, -0.1273, "Westminster Abbey, London", "Abbey Architecture Tour", 2, 25, 30, 55),
                    _p("Borough Market Area", 51.5055, -0.0910, "Borough Market, London", "Historic Southwark Walk", 3, 0, 25, 60),
                    _p("Notting Hill", 51.5111, -0.2055, "Notting Hill, London", "Colorful Streets Tour", 2, 0, 20, 50),
                    _p("Greenwich", 51.4820, -0.0089, "Greenwich, London", "Maritime Heritage Walk", 3, 0, 25, 60),
                ],
                "indoor": [
                    _p("British Museum", 51.5194, -0.1270, "Great Russell St, London", "World History Tour", 4, 0, 20, 50),
                    _p("National Gallery", 51.5089, -0.1283, "Trafalgar Square, London", "Masterpieces Tour", 3, 0, 18, 45),
                    _p("Victoria and Albert Museum", 51.4966, -0.1722, "Cromwell Rd, London", "Design & Art Tour", 3, 0, 20, 50),
                    _p("Shakespeare's Globe", 51.5081, -0.0971, "21 New Globe Walk, London", "Theatre Experience", 3, 20, 40, 80),
                    _p("Natural History Museum", 51.4967, -0.1764, "Cromwell Rd, London", "Natural Wonders Tour", 3, 0, 15, 40),
                ],
                "nightlife": [
                    _p("West End", 51.5134, -0.1276, "Leicester Square, London", "West End Theatre", 3, 40, 100, 250),
                    _p("Royal Albert Hall", 51.5009, -0.1774, "Kensington Gore, London", "Classical Concert", 3, 40, 90, 200),
                    _p("Shakespeare's Globe", 51.5081, -0.0971, "21 New Globe Walk, London", "Evening Performance", 3, 25, 55, 120),
                    _p("National Theatre", 51.5067, -0.1147, "South Bank, London", "Drama Night", 3, 25, 60, 130),
                    _p("The Comedy Store", 51.5117, -0.1318, "1a Oxendon St, London", "Stand-Up Comedy", 2, 20, 30, 55),
                ],
            },
            "food": {
                "outdoor": [
                    _p("Borough Market", 51.5055, -0.0910, "8 Southwark St, London", "Gourmet Market Tour", 3, 25, 50, 100),
                    _p("Broadway Market", 51.5377, -0.0613, "Broadway Market, London", "East London Food Walk", 3, 20, 45, 90),
                    _p("Brick Lane", 51.5215, -0.0717, "Brick Lane, London", "Curry Mile Adventure", 3, 15, 35, 70),
                    _p("Surrey Hills", 51.2243, -0.3857, "Surrey Hills", "English Vineyard Tour", 6, 60, 120, 220),
                    _p("Maltby Street Market", 51.4989, -0.0772, "Maltby St, London", "Artisan Food Market", 2, 20, 40, 80),
                ],
                "indoor": [
                    _p("Leiths School of Food", 51.5107, -0.2088, "16-20 Wendell Rd, London", "British Cooking Class", 4, 100, 180, 300),
                    _p("The Ledbury", 51.5115, -0.2029, "127 Ledbury Rd, London", "Michelin Star Experience", 3, 150, 250, 400),
                    _p("Gordon's Wine Bar", 51.5082, -0.1241, "47 Villiers St, London", "Historic Wine Tasting", 2, 25, 50, 100),
                    _p("Hotel Chocolat", 51.5134, -0.1322, "Covent Garden, London", "Chocolate Tasting", 2, 30, 50, 90),
                    _p("Monmouth Coffee", 51.5134, -0.1254, "27 Monmouth St, London", "Coffee Cupping Session", 2, 15, 30, 60),
                ],
                "nightlife": [
                    _p("Duck & Waffle", 51.5152, -0.0823, "110 Bishopsgate, London", "24hr Fine Dining", 2, 50, 90, 160),
                    _p("Dishoom", 51.5175, -0.1268, "12 Upper St Martin's Ln, London", "Bombay Café Dinner", 2, 30, 50, 90),
                    _p("Hawksmoor", 51.5204, -0.1033, "157 Commercial St, London", "Steakhouse Evening", 2, 60, 100, 180),
                    _p("The Clove Club", 51.5269, -0.0823, "380 Old St, London", "Tasting Menu", 3, 120, 180, 300),
                    _p("St. John", 51.5204, -0.1033, "26 St John St, London", "Nose-to-Tail Dinner", 2, 50, 80, 140),
                ],
            },
        },
    },
    "bali": {
        "center": (-8.4095, 115.1889),
        "country": "Indonesia",
        "currency": "IDR",
        "timezone": "Asia/Makassar",
        "pools": {
            "relax": {
                "outdoor": [
                    _p("Seminyak Beach", -8.6924, 115.1573, "Seminyak Beach, Bali", "Beach Sunset Session", 4, 0, 15, 40),
                    _p("Tegallalang Rice Terraces", -8.4312, 115.2793, "Tegallalang, Gianyar, Bali", "Rice Terrace Walk", 3, 5, 15, 35),
                    _p("Tirta Gangga", -8.4125, 115.5874, "Tirta Gangga, Karangasem, Bali", "Water Palace Visit", 3, 5, 12, 30),
                    _p("Nusa Dua Beach", -8.7993, 115.2350, "Nusa Dua, Bali", "Luxury Beach Day", 4, 10, 30, 80),
                    _p("Munduk Waterfalls", -8.2756, 115.0803, "Munduk, Buleleng, Bali", "Waterfall Meditation", 4, 5, 15, 40),
                ],
                "indoor": [
                    _p("Fivelements", -8.5478, 115.2630, "Mambal, Abiansemal, Bali", "Balinese Spa Retreat", 4, 80, 150, 300),
                    _p("Yoga Barn", -8.5076, 115.2620, "Pengosekan, Ubud, Bali", "Yoga & Meditation", 3, 15, 25, 50),
                    _p("Como Shambhala", -8.5076, 115.2620, "Banjar Begawan, Ubud, Bali", "Wellness Sanctuary", 4, 150, 280, 500),
                    _p("Kopi Luwak Farm", -8.4312, 115.2793, "Tegallalang, Gianyar, Bali", "Coffee Plantation Visit", 2, 10, 25, 50),
                    _p("Ubud Wellness Spa", -8.5076, 115.2620, "Ubud, Bali", "Traditional Balinese Massage", 3, 20, 45, 100),
                ],
                "nightlife": [
                    _p("Rock Bar Bali", -8.8291, 115.0849, "Ayana Resort, Jimbaran, Bali", "Cliff-side Sunset Drinks", 3, 30, 60, 120),
                    _p("Potato Head Beach Club", -8.6656, 115.1356, "Seminyak, Bali", "Beach Club Evening", 4, 25, 60, 150),
                    _p("La Plancha", -8.7020, 115.1670, "Seminyak Beach, Bali", "Beachfront Sunset", 3, 15, 35, 80),
                    _p("Single Fin", -8.8128, 115.0940, "Uluwatu, Bali", "Sunset Cliff Views", 3, 20, 45, 100),
                    _p("Ku De Ta", -8.6924, 115.1573, "Seminyak, Bali", "Upscale Beach Evening", 3, 40, 80, 180),
                ],
            },
            "adventure": {
                "outdoor": [
                    _p("Mount Batur", -8.2395, 115.3752, "Mount Batur, Kintamani, Bali", "Sunrise Volcano Trek", 6, 35, 60, 120),
                    _p("Ayung River", -8.4495, 115.2195, "Ayung River, Ubud, Bali", "White Water Rafting", 4, 30, 55, 100),
                    _p("Nusa Penida", -8.7275, 115.5445, "Nusa Penida, Bali", "Island Adventure Day", 8, 50, 90, 180),
                    _p("Uluwatu Cliffs", -8.8291, 115.0849, "Uluwatu, Bali", "Cliff Surfing Experience", 4, 25, 50, 100),
                    _p("Bali Swing", -8.4312, 115.2793, "Bongkasa Pertiwi, Bali", "Jungle Swing Adventure", 3, 25, 40, 80),
                ],
                "indoor": [
                    _p("Bali Treetop Adventure", -8.2756, 115.1519, "Bedugul, Bali", "Treetop Climbing", 3, 25, 40, 70),
                    _p("Bali Marine Walk", -8.7538, 115.5096, "Sanur, Bali", "Underwater Walking", 2, 50, 80, 140),
                    _p("Mason Adventures", -8.5076, 115.2620, "Ubud, Bali", "ATV & Buggy Adventure", 3, 45, 75, 140),
                    _p("Finns Recreation Club", -8.6656, 115.1356, "Canggu, Bali", "Waterpark Fun", 4, 25, 45, 90),
                    _p("Bali Safari", -8.5837, 115.3247, "Gianyar, Bali", "Night Safari Experience", 3, 40, 70, 130),
                ],
                "nightlife": [
                    _p("Uluwatu Temple", -8.8291, 115.0849, "Uluwatu, Bali", "Kecak Fire Dance", 2, 15, 25, 50),
                    _p("Mirror Bali", -8.6656, 115.1356, "Seminyak, Bali", "Beach Club Party", 4, 20, 50, 120),
                    _p("Sky Garden", -8.7186, 115.1706, "Legian, Bali", "Rooftop Clubbing", 4, 15, 30, 70),
                    _p("Omnia Dayclub", -8.8128, 115.0940, "Uluwatu, Bali", "Cliff-top Club Night", 4, 35, 80, 180),
                    _p("Old Man's", -8.6656, 115.1356, "Canggu, Bali", "Surfer Bar Night", 3, 10, 25, 60),
                ],
            },
            "cultural": {
                "outdoor": [
                    _p("Tanah Lot Temple", -8.6212, 115.0868, "Tanah Lot, Tabanan, Bali", "Sea Temple Sunset", 3, 5, 12, 30),
                    _p("Ubud Palace", -8.5076, 115.2620, "Jl. Raya Ubud, Ubud, Bali", "Royal Palace Visit", 2, 0, 10, 25),
                    _p("Tirta Empul", -8.4154, 115.3154, "Tampaksiring, Gianyar, Bali", "Holy Spring Purification", 3, 5, 15, 35),
                    _p("Besakih Temple", -8.3741, 115.4509, "Besakih, Karangasem, Bali", "Mother Temple Tour", 4, 10, 25, 60),
                    _p("Ubud Art Market", -8.5076, 115.2620, "Jl. Raya Ubud, Ubud, Bali", "Traditional Crafts Walk", 2, 0, 20, 50),
                ],
                "indoor": [
                    _p("ARMA Museum", -8.5139, 115.2587, "Jl. Raya Pengosekan, Ubud, Bali", "Balinese Art Museum", 3, 10, 18, 40),
                    _p("Setia Darma House of Masks", -8.5467, 115.2614, "Mas, Ubud, Bali", "Mask Culture Tour", 2, 5, 12, 30),
                    _p("Blanco Renaissance Museum", -8.5024, 115.2677, "Campuhan, Ubud, Bali", "Artist Legacy Tour", 2, 8, 15, 35),
                    _p("Ubud Traditional Dance", -8.5076, 115.2620, "Ubud Palace, Bali", "Legong Dance Performance", 2, 10, 20, 45),
                    _p("Batik Workshop", -8.5076, 115.2620, "Ubud, Bali", "Traditional Batik Class", 3, 25, 45, 90),
                ],
                "nightlife": [
                    _p("Ubud Palace", -8.5076, 115.2620, "Ubud Palace, Bali", "Kecak Dance Performance", 2, 10, 20, 45),
                    _p("Pura Luhur Uluwatu", -8.8291, 115.0849, "Uluwatu, Bali", "Sunset Fire Dance", 2, 15, 25, 50),
                    _p("Gamelan Performance", -8.5076, 115.2620, "Ubud, Bali", "Traditional Music Night", 2, 10, 20, 40),
                    _p("Shadow Puppet Show", -8.5076, 115.2620, "Ubud, Bali", "Wayang Kulit Show", 2, 8, 15, 35),
                    _p("Barong Dance", -8.5076, 115.2620, "Batubulan, Bali", "Traditional Barong Dance", 2, 10, 18, 40),
                ],
            },
            "food": {
                "outdoor": [
                    _p("Ubud Market", -8.5076, 115.2620, "Jl. Raya Ubud, Ubud, Bali", "Traditional Market Tour", 3, 10, 25, 60),
                    _p("Jimbaran Bay", -8.7842, 115.1592, "Jimbaran Beach, Bali", "Seafood Beach Dinner", 3, 20, 45, 100),
                    _p("Babi Guling Street", -8.5076, 115.2620, "Ubud, Bali", "Roast Pig Food Trail", 3, 10, 20, 45),
                    _p("Organic Farm", -8.4312, 115.2793, "Tegallalang, Bali", "Farm to Table Experience", 4, 35, 65, 130),
                    _p("Night Market Gianyar", -8.5416, 115.3247, "Gianyar, Bali", "Night Market Food Safari", 3, 8, 18, 40),
                ],
                "indoor": [
                    _p("Casa Luna Cooking School", -8.5076, 115.2620, "Jl. Raya Ubud, Ubud, Bali", "Balinese Cooking Class", 4, 35, 60, 120),
                    _p("Locavore", -8.5076, 115.2620, "Jl. Dewi Sita, Ubud, Bali", "Fine Dining Experience", 3, 80, 150, 280),
                    _p("Arak Tasting", -8.6656, 115.1356, "Canggu, Bali", "Local Spirit Tasting", 2, 15, 30, 60),
                    _p("Chocolate Factory", -8.5076, 115.2620, "Ubud, Bali", "Chocolate Making Class", 2, 30, 55, 100),
                    _p("Seniman Coffee Studio", -8.5076, 115.2620, "Jl. Sriwedari, Ubud, Bali", "Coffee Brewing Workshop", 2, 15, 30, 60),
                ],
                "nightlife": [
                    _p("Mozaic Restaurant", -8.5076, 115.2620, "Ubud, Bali", "Fine Dining Tasting Menu", 3, 100, 180, 320),
                    _p("Merah Putih", -8.6656, 115.1356, "Seminyak, Bali", "Modern Indonesian Dinner", 2, 40, 70, 140),
                    _p("Sardine", -8.6656, 115.1356, "Seminyak, Bali", "Rice Paddy Dinner", 2, 45, 80, 160),
                    _p("Naughty Nuri's", -8.5076, 115.2620, "Ubud, Bali", "Famous Ribs & Martinis", 2, 25, 45, 90),
                    _p("Bambu Restaurant", -8.6656, 115.1356, "Seminyak, Bali", "Indonesian Feast", 2, 30, 55, 110),
                ],
            },
        },
    },
}


# Template used when nothing is known about the destination at all.
DEFAULT_POOLS: dict[str, dict] = {
    "relax": {
        "outdoor": [
            _p("City Park", 0, 0, "Central Park Area", "Park Relaxation", 3, 0, 15, 40),
            _p("Botanical Garden", 0, 0, "Botanical Gardens", "Garden Stroll", 3, 10, 20, 45),
            _p("Waterfront", 0, 0, "Waterfront Promenade", "Seaside Walk", 2, 0, 10, 30),
        ],
        "indoor": [
            _p("Wellness Spa", 0, 0, "Downtown Spa", "Spa Treatment", 3, 50, 100, 200),
            _p("Cozy Café", 0, 0, "Main Street Café", "Café Relaxation", 2, 10, 25, 50),
            _p("Bookstore", 0, 0, "Independent Bookstore", "Book Browsing", 2, 0, 20, 50),
        ],
        "nightlife": [
            _p("Rooftop Bar", 0, 0, "Downtown Rooftop", "Rooftop Drinks", 2, 25, 50, 100),
            _p("Jazz Club", 0, 0, "Music District", "Live Jazz", 3, 30, 60, 120),
            _p("Wine Bar", 0, 0, "Wine District", "Wine Tasting", 2, 25, 50, 100),
        ],
    },
    "adventure": {
        "outdoor": [
            _p("Hiking Trail", 0, 0, "Mountain Trail Head", "Mountain Hiking", 5, 10, 30, 70),
            _p("River", 0, 0, "River Launch Point", "Kayaking Adventure", 4, 40, 70, 120),
            _p("Cycling Route", 0, 0, "Bike Rental Station", "Cycling Tour", 4, 20, 40, 80),
        ],
        "indoor": [
            _p("Climbing Gym", 0, 0, "Indoor Climbing Center", "Rock Climbing", 3, 25, 45, 80),
            _p("Escape Room", 0, 0, "Escape Room Center", "Escape Challenge", 2, 30, 50, 90),
            _p("VR Arcade", 0, 0, "VR Gaming Center", "VR Experience", 2, 25, 45, 80),
        ],
        "nightlife": [
            _p("Night Club", 0, 0, "Entertainment District", "Club Night", 4, 20, 50, 100),
            _p("Observation Deck", 0, 0, "Tallest Building", "Night Views", 2, 25, 40, 80),
            _p("Night Market", 0, 0, "Market District", "Night Market Walk", 3, 15, 35, 70),
        ],
    },
    "cultural": {
        "outdoor": [
            _p("Historic District", 0, 0, "Old Town", "Historical Walking Tour", 3, 0, 25, 60),
            _p("Heritage Site", 0, 0, "UNESCO Site", "Heritage Exploration", 4, 15, 30, 70),
            _p("Local Market", 0, 0, "Traditional Market", "Market Culture Tour", 3, 0, 20, 50),
        ],
        "indoor": [
            _p("National Museum", 0, 0, "Museum District", "Museum Tour", 4, 15, 30, 60),
            _p("Art Gallery", 0, 0, "Gallery Row", "Art Exhibition", 3, 10, 25, 55),
            _p("Cultural Center", 0, 0, "Cultural Center", "Cultural Performance", 3, 20, 45, 100),
        ],
        "nightlife": [
            _p("Theater", 0, 0, "Theater District", "Evening Performance", 3, 40, 100, 250),
            _p("Opera House", 0, 0, "Opera District", "Opera Night", 3, 50, 120, 300),
            _p("Comedy Club", 0, 0, "Entertainment District", "Comedy Show", 2, 25, 45, 90),
        ],
    },
    "food": {
        "outdoor": [
            _p("Food Market", 0, 0, "Central Food Market", "Market Food Tour", 3, 20, 45, 90),
            _p("Street Food Area", 0, 0, "Street Food District", "Street Food Safari", 3, 15, 35, 70),
            _p("Vineyard", 0, 0, "Wine Region", "Vineyard Visit", 5, 60, 120, 220),
        ],
        "indoor": [
            _p("Cooking School", 0, 0, "Culinary Institute", "Cooking Class", 4, 60, 120, 220),
            _p("Fine Restaurant", 0, 0, "Fine Dining District", "Gourmet Dining", 3, 80, 150, 300),
            _p("Wine Bar", 0, 0, "Wine Quarter", "Wine Tasting", 2, 30, 60, 120),
        ],
        "nightlife": [
            _p("Fine Dining", 0, 0, "Restaurant District", "Evening Tasting Menu", 3, 100, 180, 350),
            _p("Cocktail Bar", 0, 0, "Bar District", "Craft Cocktails", 2, 30, 60, 120),
            _p("Late Night Eatery", 0, 0, "Night District", "Late Night Bites", 2, 20, 40, 80),
        ],
    },
}


# Templates for coordinate-driven fallbacks: (name, activity, hours, low, medium, high).
# "{city}" is replaced by the requested destination name.
FALLBACK_OUTDOOR: tuple[tuple, ...] = (
    ("{city} Park",       "{verb} Park Walk",       3,  0, 15, 40),
    ("{city} Gardens",    "Garden Visit",           2,  5, 20, 45),
    ("Historic {city}",   "Historic District Walk", 3,  0, 25, 60),
    ("{city} Waterfront", "Waterfront Stroll",      2,  0, 10, 30),
    ("{city} Market",     "Local Market Visit",     2, 15, 35, 70),
)

FALLBACK_INDOOR: tuple[tuple, ...] = (
    ("{city} Museum",     "Museum Tour",          3, 12, 25,  55),
    ("Art Gallery",       "Art Exhibition Visit", 2, 10, 22,  50),
    ("Wellness Center",   "Spa & Wellness",       3, 45, 90, 180),
    ("Shopping District", "Shopping Experience",  3,  0, 50, 150),
    ("Cultural Center",   "Cultural Experience",  2, 15, 35,  75),
)

FALLBACK_NIGHTLIFE: tuple[tuple, ...] = (
    ("{city} Rooftop",     "Rooftop Evening Drinks",     2, 25, 55, 110),
    ("Live Music Venue",   "Live Music Night",           3, 20, 45,  95),
    ("Fine Dining",        "Dinner Experience",          2, 40, 80, 160),
    ("Night Market",       "Evening Market Exploration", 2, 15, 35,  75),
    ("Entertainment Area", "Nightlife Experience",       3, 30, 65, 140),
)
