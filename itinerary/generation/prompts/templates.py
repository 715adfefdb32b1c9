"""
Prompt templates for itinerary generation.

The language line is chosen per request; the body is shared across
languages so the JSON shape stays identical.
"""

LANGUAGE_INSTRUCTIONS = {
    "th": (
        "คุณต้องตอบเป็นภาษาไทยเท่านั้น "
        "ทุกคำอธิบาย ชื่อกิจกรรม และสถานที่ต้องเป็นภาษาไทย"
    ),
    "en": (
        "You must respond in English only. All descriptions, activity names, "
        "and locations must be in English."
    ),
}

GENERIC_LANGUAGE_INSTRUCTION = (
    "You must respond only in the language identified by the language tag "
    '"{language}". All descriptions, activity names, and locations must be '
    "in that language."
)

MIN_ACTIVITIES_PER_DAY = 3

RECOMMENDATION_MINIMUMS = {
    "place": 2,
    "restaurant": 2,
    "experience": 1,
}

JSON_EXAMPLE = """{
  "dailySchedules": [
    {
      "day": 1,
      "activities": [
        {"time": "09:00", "name": "Activity name", "location": "Location", "description": "Description"}
      ]
    }
  ],
  "recommendations": [
    {"category": "place", "name": "Place name", "description": "Description", "location": "Address"}
  ]
}"""

ITINERARY_PROMPT_TEMPLATE = """{language_instruction}

Create a travel itinerary for {destination} lasting {duration} {day_word}.

Structure the itinerary as follows:

1. Daily schedules (dailySchedules): exactly {duration} entries, one per day, with "day" numbered from 1 to {duration}. Each day must contain at least {min_activities} activities.
   Every activity must have:
     * time: start time in HH:mm 24-hour format (e.g. "09:00", "14:30")
     * name: activity name
     * location: where it takes place
     * description: a short description

2. Recommendations (recommendations): at least {total_recommendations} entries, including:
   - at least {min_place} places to visit (category: "place")
   - at least {min_restaurant} restaurants (category: "restaurant")
   - at least {min_experience} special experience (category: "experience")
   "location" is optional for recommendations.

Respond with JSON only, with no other text, using exactly this shape:

{json_example}"""
