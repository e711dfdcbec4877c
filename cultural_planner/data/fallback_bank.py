"""
Pre-authored activity templates used when extraction yields too little.

The tables are built once at import time and exposed as tuples and read-only
mappings. ``{destination}`` placeholders are substituted at render time.
"""

from dataclasses import dataclass
from types import MappingProxyType

from cultural_planner.schemas.itinerary import PracticalInfo

DESTINATION_PLACEHOLDER = "{destination}"


@dataclass(frozen=True, slots=True)
class ActivityTemplate:
    """One pre-authored activity."""

    title: str
    location: str
    description: str
    cultural_context: str
    tips: str
    weather_alternative: str
    practical_info: PracticalInfo
    time: str = ""

    def render(self, destination: str) -> dict[str, object]:
        """Return the template fields with the destination substituted."""

        def fill(value: str) -> str:
            return value.replace(DESTINATION_PLACEHOLDER, destination)

        return {
            "title": fill(self.title),
            "location": fill(self.location),
            "description": fill(self.description),
            "cultural_context": fill(self.cultural_context),
            "tips": fill(self.tips),
            "weather_alternative": fill(self.weather_alternative),
            "practical_info": self.practical_info,
        }


# --- Practical info presets ---
GENERAL_VISIT = PracticalInfo(
    duration="2-3 hours",
    cost="₹500-1000 per person",
    booking="No reservation required",
    dress_code="Casual, respectful attire",
    photography="Permitted in most areas",
    transport="Available by auto-rickshaw or taxi",
)
MONUMENT = PracticalInfo(
    duration="2-3 hours",
    cost="₹50 (Indian citizens), ₹1100 (foreign visitors)",
    booking="Buy tickets online to skip the queue",
    dress_code="Comfortable clothing, shoulders and knees covered",
    photography="Allowed outside, restricted inside the main chambers",
    transport="Auto-rickshaw, taxi or e-rickshaw to the main gate",
)
DINING = PracticalInfo(
    duration="1-2 hours",
    cost="₹400-1200 per person",
    booking="Reservation recommended for groups",
    dress_code="Smart casual",
    photography="Permitted, ask before photographing staff",
    transport="Taxi or app-based cab",
)
WORKSHOP = PracticalInfo(
    duration="2 hours",
    cost="₹800-1500 per person including materials",
    booking="Book at least one day in advance",
    dress_code="Clothes you do not mind getting dusty",
    photography="Ask the artisans before taking photos",
    transport="Auto-rickshaw from the city center",
)
PERFORMANCE = PracticalInfo(
    duration="1.5-2 hours",
    cost="₹600-1500 per ticket",
    booking="Advance booking recommended on weekends",
    dress_code="Smart casual",
    photography="No flash photography during the show",
    transport="Taxi or app-based cab",
)
MARKET = PracticalInfo(
    duration="2-3 hours",
    cost="Free entry, budget ₹300-800 for tastings",
    booking="No reservation required",
    dress_code="Comfortable walking shoes",
    photography="Permitted, ask vendors before close-ups",
    transport="Walk or cycle-rickshaw through the lanes",
)
SPIRITUAL = PracticalInfo(
    duration="1-2 hours",
    cost="Free, donations welcome",
    booking="No reservation required",
    dress_code="Modest clothing, remove shoes where required",
    photography="Not permitted during prayers",
    transport="Auto-rickshaw or walk from the old city",
)
NATURE = PracticalInfo(
    duration="2 hours",
    cost="₹100-300 entry",
    booking="No reservation required",
    dress_code="Light clothing, hat and sunscreen",
    photography="Permitted everywhere",
    transport="Taxi or rented scooter",
)


# --- Slot tier: one activity per anchor time, indexed by (hour + day) ---
SLOT_TEMPLATES: tuple[ActivityTemplate, ...] = (
    ActivityTemplate(
        title="Cultural Heritage Walk",
        location="{destination} Old Town",
        description="Explore the historical streets and landmarks of {destination}",
        cultural_context="Learn about the local history and architectural influences",
        tips="Wear comfortable walking shoes and carry water",
        weather_alternative="Visit the local history museum",
        practical_info=GENERAL_VISIT,
    ),
    ActivityTemplate(
        title="Local Cuisine Experience",
        location="{destination} Cultural Center",
        description="Sample authentic {destination} flavors at a traditional restaurant",
        cultural_context="Discover the culinary heritage and spice traditions",
        tips="Ask locals for their favorite dishes and specialties",
        weather_alternative="Take a cooking class at an indoor venue",
        practical_info=GENERAL_VISIT,
    ),
    ActivityTemplate(
        title="Artisan Workshop Visit",
        location="{destination} Cultural Center",
        description="Observe local craftspeople creating traditional {destination} handicrafts",
        cultural_context="Understand the artistic techniques passed down through generations",
        tips="Support local artisans by purchasing directly from them",
        weather_alternative="Visit an indoor craft exhibition or gallery",
        practical_info=GENERAL_VISIT,
    ),
    ActivityTemplate(
        title="Evening Cultural Performance",
        location="{destination} Cultural Center",
        description="Enjoy traditional music, dance, or theatrical performance",
        cultural_context="Experience the performing arts traditions of the region",
        tips="Arrive early for the best seating",
        weather_alternative="Indoor theater or cultural center performance",
        practical_info=GENERAL_VISIT,
    ),
)

PLACEHOLDER_DAY_TEXT = "Explore {destination} at your own pace."


# --- Itinerary tier: curated multi-day banks ---
AGRA_BANK: tuple[tuple[ActivityTemplate, ...], ...] = (
    # Day 1 - Classic Monuments
    (
        ActivityTemplate(
            time="9:00 AM",
            title="Taj Mahal Sunrise Visit",
            location="Taj Mahal",
            description=(
                "Experience the breathtaking Taj Mahal during the magical sunrise hours. "
                "Best time for photos and peaceful exploration."
            ),
            cultural_context=(
                "UNESCO World Heritage site, built by Emperor Shah Jahan as a testament of love."
            ),
            tips="The monument is closed on Fridays; arrive at the East Gate before opening",
            weather_alternative="Visit the Taj Museum inside the complex",
            practical_info=MONUMENT,
        ),
        ActivityTemplate(
            time="1:00 PM",
            title="Royal Mughlai Feast",
            location="Pind Balluchi, Agra",
            description=(
                "Indulge in authentic Mughlai dining featuring royal recipes "
                "passed down through generations."
            ),
            cultural_context="Experience the royal cuisine of the Mughal era.",
            tips="Try the dum biryani and finish with kulfi",
            weather_alternative="Indoor seating is available year-round",
            practical_info=DINING,
        ),
        ActivityTemplate(
            time="3:00 PM",
            title="Agra Fort Heritage Tour",
            location="Agra Fort",
            description=(
                "Explore this massive red sandstone fort complex with its palaces and audience halls."
            ),
            cultural_context="Former residence of Mughal emperors including Shah Jahan.",
            tips="Hire an approved guide at the Amar Singh Gate",
            weather_alternative="Focus on the covered halls of Diwan-i-Khas",
            practical_info=MONUMENT,
        ),
        ActivityTemplate(
            time="7:00 PM",
            title="Mohabbat the Taj Show",
            location="Kalakriti Cultural Center",
            description=(
                "Watch a spectacular cultural show depicting the love story behind the Taj Mahal."
            ),
            cultural_context="Theatrical representation of Mughal era culture and customs.",
            tips="Headphones with translations are available at the entrance",
            weather_alternative="The show is staged indoors",
            practical_info=PERFORMANCE,
        ),
    ),
    # Day 2 - Local Culture
    (
        ActivityTemplate(
            time="9:00 AM",
            title="Marble Crafts Workshop",
            location="Agra Marble Workshop",
            description=(
                "Learn from local artisans about the intricate marble inlay work (pietra dura)."
            ),
            cultural_context="Traditional craft techniques passed down through generations.",
            tips="Buy from cooperative workshops to support the artisans directly",
            weather_alternative="The workshop is fully indoors",
            practical_info=WORKSHOP,
        ),
        ActivityTemplate(
            time="1:00 PM",
            title="Street Food Tour",
            location="Sadar Bazaar",
            description="Explore Agra's famous street food, including petha and paratha.",
            cultural_context="Local culinary traditions and street food culture.",
            tips="Stick to busy stalls where food is cooked fresh",
            weather_alternative="Try the covered sweet shops of Kinari Bazaar",
            practical_info=MARKET,
        ),
        ActivityTemplate(
            time="3:00 PM",
            title="Mehtab Bagh Gardens",
            location="Mehtab Bagh",
            description="Visit the moonlight garden with perfect views of the Taj Mahal.",
            cultural_context="Mughal garden architecture and landscaping traditions.",
            tips="Stay for the late afternoon light on the Taj across the river",
            weather_alternative="Visit the Itmad-ud-Daulah tomb nearby",
            practical_info=NATURE,
        ),
        ActivityTemplate(
            time="7:00 PM",
            title="Cooking Class",
            location="Local Home Kitchen",
            description="Learn to prepare traditional Mughlai dishes with a local family.",
            cultural_context="Home cooking traditions and family recipes.",
            tips="Mention dietary restrictions when booking",
            weather_alternative="The class is held indoors",
            practical_info=WORKSHOP,
        ),
    ),
    # Day 3 - Hidden Gems
    (
        ActivityTemplate(
            time="9:00 AM",
            title="Fatehpur Sikri Tour",
            location="Fatehpur Sikri",
            description="Explore the abandoned Mughal city and its architectural marvels.",
            cultural_context="UNESCO site showcasing Mughal urban planning.",
            tips="Leave early, the drive from Agra takes about an hour",
            weather_alternative="Spend more time in the covered Jama Masjid courtyards",
            practical_info=MONUMENT,
        ),
        ActivityTemplate(
            time="1:00 PM",
            title="Village Lunch Experience",
            location="Kachhpura Village",
            description="Enjoy a traditional lunch in a rural setting.",
            cultural_context="Rural Indian lifestyle and agricultural traditions.",
            tips="Arrange the visit through a community tourism initiative",
            weather_alternative="Lunch is served inside a village home",
            practical_info=DINING,
        ),
        ActivityTemplate(
            time="3:00 PM",
            title="Tomb of Akbar Tour",
            location="Sikandra",
            description="Visit the magnificent tomb of Emperor Akbar the Great.",
            cultural_context="Mughal funerary architecture and history.",
            tips="Look out for the deer and langurs in the gardens",
            weather_alternative="Explore the covered gateway galleries",
            practical_info=MONUMENT,
        ),
        ActivityTemplate(
            time="7:00 PM",
            title="Yamuna Aarti Ceremony",
            location="Yamuna Ghat",
            description="Witness the evening prayer ceremony by the Yamuna River.",
            cultural_context="Hindu religious traditions and river worship.",
            tips="Arrive before sunset to find a good spot on the steps",
            weather_alternative="Attend the evening prayers at a nearby temple",
            practical_info=SPIRITUAL,
        ),
    ),
)

JAIPUR_BANK: tuple[tuple[ActivityTemplate, ...], ...] = (
    (
        ActivityTemplate(
            time="9:00 AM",
            title="Amber Fort Morning Tour",
            location="Amber Fort",
            description="Walk the ramparts and mirror halls of the hilltop fort.",
            cultural_context="Seat of the Kachwaha Rajputs before Jaipur was founded.",
            tips="Take the jeep up instead of the elephant rides",
            weather_alternative="Spend longer inside the Sheesh Mahal",
            practical_info=MONUMENT,
        ),
        ActivityTemplate(
            time="1:00 PM",
            title="Rajasthani Thali Lunch",
            location="LMB, Johari Bazaar",
            description="Share a traditional vegetarian thali in the walled city.",
            cultural_context="Desert cuisine shaped by scarce water and fresh produce.",
            tips="Save room for the ghewar",
            weather_alternative="Indoor seating is available year-round",
            practical_info=DINING,
        ),
        ActivityTemplate(
            time="3:00 PM",
            title="City Palace and Jantar Mantar",
            location="City Palace, Jaipur",
            description="Tour the royal residence and the stone astronomical instruments next door.",
            cultural_context="Maharaja Jai Singh II combined statecraft with astronomy.",
            tips="Buy the composite ticket to cover both sites",
            weather_alternative="Focus on the palace museum galleries",
            practical_info=MONUMENT,
        ),
        ActivityTemplate(
            time="7:00 PM",
            title="Folk Dance Evening",
            location="Chokhi Dhani",
            description="Watch Kalbelia and Ghoomar dancers in a recreated village.",
            cultural_context="Folk traditions of Rajasthan's nomadic communities.",
            tips="Go hungry, dinner is included with entry",
            weather_alternative="Covered pavilions host the performances",
            practical_info=PERFORMANCE,
        ),
    ),
    (
        ActivityTemplate(
            time="9:00 AM",
            title="Block Printing Workshop",
            location="Sanganer",
            description="Print your own fabric with carved wooden blocks.",
            cultural_context="Hand block printing has been practiced here for centuries.",
            tips="Wear old clothes, natural dyes stain",
            weather_alternative="The workshop is fully indoors",
            practical_info=WORKSHOP,
        ),
        ActivityTemplate(
            time="1:00 PM",
            title="Bazaar Food Walk",
            location="Bapu Bazaar",
            description="Taste pyaaz kachori and lassi between textile stalls.",
            cultural_context="Jaipur's markets were planned with the city in 1727.",
            tips="Bargain politely, start at half the asking price",
            weather_alternative="Shop in the covered arcades of MI Road",
            practical_info=MARKET,
        ),
        ActivityTemplate(
            time="3:00 PM",
            title="Hawa Mahal Visit",
            location="Hawa Mahal",
            description="Climb the honeycomb facade built for royal women to watch the street.",
            cultural_context="A landmark of the purdah era's architecture.",
            tips="The best facade photos are from the cafes across the road",
            weather_alternative="Visit the Albert Hall Museum",
            practical_info=MONUMENT,
        ),
        ActivityTemplate(
            time="7:00 PM",
            title="Sunset at Nahargarh",
            location="Nahargarh Fort",
            description="Watch the pink city light up from the ridge-top fort.",
            cultural_context="The fort guarded the city's northern approach.",
            tips="Carry a light jacket, it gets windy",
            weather_alternative="Dinner at a rooftop restaurant in the old city",
            practical_info=NATURE,
        ),
    ),
)

VARANASI_BANK: tuple[tuple[ActivityTemplate, ...], ...] = (
    (
        ActivityTemplate(
            time="6:00 AM",
            title="Sunrise Boat Ride",
            location="Dashashwamedh Ghat",
            description="Row along the ghats as the city wakes up on the Ganges.",
            cultural_context="Bathing at dawn is one of the oldest living rituals in India.",
            tips="Agree the boat fare before boarding",
            weather_alternative="Walk the upper ghat terraces instead",
            practical_info=SPIRITUAL,
        ),
        ActivityTemplate(
            time="11:00 AM",
            title="Kashi Vishwanath Corridor",
            location="Kashi Vishwanath Temple",
            description="Visit the temple of Shiva at the heart of the old city.",
            cultural_context="One of the twelve jyotirlingas of Shiva.",
            tips="Phones and bags must be left in the lockers",
            weather_alternative="The corridor halls are covered",
            practical_info=SPIRITUAL,
        ),
        ActivityTemplate(
            time="2:00 PM",
            title="Banarasi Silk Weaving Visit",
            location="Madanpura Weavers' Quarter",
            description="See handlooms produce brocade saris thread by thread.",
            cultural_context="A craft tradition dating back to the Mughal era.",
            tips="Ask for a certificate of authenticity when buying",
            weather_alternative="The looms are indoors",
            practical_info=WORKSHOP,
        ),
        ActivityTemplate(
            time="6:30 PM",
            title="Ganga Aarti",
            location="Dashashwamedh Ghat",
            description="Watch priests perform the fire ceremony to the river.",
            cultural_context="A nightly offering of light to the goddess Ganga.",
            tips="Watch from a boat for an uncrowded view",
            weather_alternative="The ceremony continues in light rain under canopies",
            practical_info=SPIRITUAL,
        ),
    ),
    (
        ActivityTemplate(
            time="8:00 AM",
            title="Sarnath Excursion",
            location="Sarnath",
            description="Visit the deer park where the Buddha gave his first sermon.",
            cultural_context="One of the four main Buddhist pilgrimage sites.",
            tips="The archaeological museum is closed on Fridays",
            weather_alternative="Spend longer in the museum",
            practical_info=MONUMENT,
        ),
        ActivityTemplate(
            time="1:00 PM",
            title="Old City Street Food",
            location="Kachori Gali",
            description="Try kachori sabzi, malaiyo and Banarasi paan.",
            cultural_context="Street food shaped by centuries of pilgrims.",
            tips="Eat where the locals queue",
            weather_alternative="Sit down at a sweet shop in Godowlia",
            practical_info=MARKET,
        ),
        ActivityTemplate(
            time="4:00 PM",
            title="Ramnagar Fort",
            location="Ramnagar Fort",
            description="Explore the Maharaja of Benares' riverside fort and museum.",
            cultural_context="Home of the former royal family of Varanasi.",
            tips="Cross by boat for the best view of the fort walls",
            weather_alternative="The museum halls are indoors",
            practical_info=MONUMENT,
        ),
        ActivityTemplate(
            time="7:30 PM",
            title="Classical Music Recital",
            location="Assi Ghat",
            description="Hear Hindustani classical music by the river.",
            cultural_context="Varanasi is home to the Benares gharana of music.",
            tips="Check the evening programme at Assi Ghat in the afternoon",
            weather_alternative="Indoor recitals are held at the cultural center",
            practical_info=PERFORMANCE,
        ),
    ),
)

GENERIC_BANK: tuple[tuple[ActivityTemplate, ...], ...] = (
    # Day 1 - Heritage
    (
        ActivityTemplate(
            time="9:00 AM",
            title="Heritage Walking Tour",
            location="{destination} Old City",
            description="Explore the cultural heritage of {destination} with a guided walking tour.",
            cultural_context="Historical significance and architectural heritage.",
            tips="Wear comfortable walking shoes and carry water",
            weather_alternative="Visit the {destination} city museum",
            practical_info=GENERAL_VISIT,
        ),
        ActivityTemplate(
            time="1:00 PM",
            title="Traditional Lunch",
            location="{destination} Heritage Restaurant",
            description="Experience local flavors and culinary traditions.",
            cultural_context="Regional cuisine and dining customs.",
            tips="Ask for the house speciality",
            weather_alternative="Indoor seating is available year-round",
            practical_info=DINING,
        ),
        ActivityTemplate(
            time="3:00 PM",
            title="Temple Visit",
            location="{destination} Main Temple",
            description="Explore ancient temples and religious sites.",
            cultural_context="Religious practices and architectural styles.",
            tips="Remove shoes before entering the inner sanctum",
            weather_alternative="Spend longer in the covered prayer halls",
            practical_info=SPIRITUAL,
        ),
        ActivityTemplate(
            time="7:00 PM",
            title="Cultural Performance",
            location="{destination} Cultural Center",
            description="Watch traditional music and dance performances.",
            cultural_context="Performing arts traditions.",
            tips="Arrive early for the best seating",
            weather_alternative="The performance is staged indoors",
            practical_info=PERFORMANCE,
        ),
    ),
    # Day 2 - Local Life
    (
        ActivityTemplate(
            time="9:00 AM",
            title="Local Market Tour",
            location="{destination} Market",
            description="Explore bustling local markets and bazaars.",
            cultural_context="Trading traditions and local commerce.",
            tips="Carry small change and bargain politely",
            weather_alternative="Browse the covered shopping arcades",
            practical_info=MARKET,
        ),
        ActivityTemplate(
            time="1:00 PM",
            title="Street Food Trail",
            location="{destination} Food Street",
            description="Sample famous local street food specialties.",
            cultural_context="Street food culture and culinary heritage.",
            tips="Choose busy stalls where food is cooked fresh",
            weather_alternative="Try a sit-down restaurant serving street classics",
            practical_info=MARKET,
        ),
        ActivityTemplate(
            time="3:00 PM",
            title="Artisan Workshop",
            location="{destination} Craft Center",
            description="Meet local craftspeople and learn traditional skills.",
            cultural_context="Traditional crafts and artisanal skills.",
            tips="Support artisans by buying directly from them",
            weather_alternative="The workshop is held indoors",
            practical_info=WORKSHOP,
        ),
        ActivityTemplate(
            time="7:00 PM",
            title="Community Dinner",
            location="{destination} Community Center",
            description="Share a meal with locals and learn about their lifestyle.",
            cultural_context="Community traditions and social customs.",
            tips="Bring a small gift for your hosts",
            weather_alternative="Dinner is served indoors",
            practical_info=DINING,
        ),
    ),
    # Day 3 - Nature and Spirituality
    (
        ActivityTemplate(
            time="9:00 AM",
            title="Morning Meditation",
            location="{destination} Spiritual Center",
            description="Start the day with guided meditation or yoga.",
            cultural_context="Spiritual practices and wellness traditions.",
            tips="Bring a light shawl and arrive a few minutes early",
            weather_alternative="Sessions move to the indoor hall",
            practical_info=SPIRITUAL,
        ),
        ActivityTemplate(
            time="1:00 PM",
            title="Organic Farm Lunch",
            location="Organic Farm near {destination}",
            description="Visit a local organic farm and enjoy fresh cuisine.",
            cultural_context="Agricultural traditions and sustainable practices.",
            tips="Ask the farmers about seasonal produce",
            weather_alternative="Lunch is served in the farmhouse",
            practical_info=DINING,
        ),
        ActivityTemplate(
            time="3:00 PM",
            title="Nature Walk",
            location="{destination} Nature Park",
            description="Explore local flora and natural heritage sites.",
            cultural_context="Environmental conservation and natural heritage.",
            tips="Carry water and wear a hat",
            weather_alternative="Visit the {destination} botanical conservatory",
            practical_info=NATURE,
        ),
        ActivityTemplate(
            time="7:00 PM",
            title="Evening Ritual",
            location="{destination} Sacred Site",
            description="Participate in traditional evening ceremonies.",
            cultural_context="Religious ceremonies and rituals.",
            tips="Follow the lead of local worshippers",
            weather_alternative="Join the prayers inside the main shrine",
            practical_info=SPIRITUAL,
        ),
    ),
)

CURATED_BANKS: MappingProxyType[str, tuple[tuple[ActivityTemplate, ...], ...]] = MappingProxyType(
    {
        "Agra": AGRA_BANK,
        "Jaipur": JAIPUR_BANK,
        "Varanasi": VARANASI_BANK,
    },
)
