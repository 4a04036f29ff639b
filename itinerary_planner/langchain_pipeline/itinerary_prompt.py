from langchain_core.prompts import PromptTemplate

itinerary_prompt = PromptTemplate.from_template("""
Create a day-by-day travel itinerary for a trip to {city} for {days} days with a total budget of {budget}.

Your task is to generate a single, valid JSON object containing the complete itinerary.

JSON Structure Requirements:
The root object must contain the following keys: "city", "budget", "total_days", and "itinerary".
- "itinerary" must be an array of day objects.
- Each day object in the array must contain:
  - "day": (Integer) The day number.
  - "title": (String) A short, thematic title for the day.
  - "summary": (String) A 1-2 sentence summary of the day's plan.
  - "attractions": (Array of Strings) A list of 5-7 attractions or activities.
  - "dining": (Array of Objects) A list of 2-3 dining suggestions.
    - Each dining object must contain:
      - "name": (String) The name of the restaurant.
      - "meal": (String) The suggested meal (e.g., "Breakfast", "Lunch", "Dinner").
      - "estimated_cost_usd": (String) The estimated cost per person in USD (e.g., "$10-15").

IMPORTANT RULES:
- Ensure all locations and restaurants are real and located in {city}.
- The final output MUST be only the raw JSON object, with no additional text, explanations, or markdown formatting like ```json.
""".strip())
