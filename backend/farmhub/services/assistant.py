"""
Farming assistant: canned answers chosen by keyword.

Matching is a case-insensitive substring test over an ordered table; the first
topic with a matching keyword wins.
"""
from typing import Sequence, Tuple

TOPICS: Sequence[Tuple[Tuple[str, ...], str]] = (
    (
        ("weather", "rain"),
        "Weather is crucial for farming! I recommend checking the Weather widget on your dashboard "
        "for real-time updates. For rain predictions, monitor the forecast regularly and plan your "
        "irrigation accordingly. Would you like tips on rain-dependent crops?",
    ),
    (
        ("pest", "insect"),
        "Pest management is vital! Here are some tips:\n\n"
        "1. Regular monitoring and early detection\n"
        "2. Use integrated pest management (IPM) strategies\n"
        "3. Rotate crops to break pest cycles\n"
        "4. Maintain healthy soil to strengthen plants\n"
        "5. Use natural predators when possible\n\n"
        "What specific pest are you dealing with?",
    ),
    (
        ("soil", "fertilizer"),
        "Soil health is the foundation of good farming! Consider:\n\n"
        "1. Test soil pH regularly (ideal: 6.0-7.0 for most crops)\n"
        "2. Add organic matter like compost\n"
        "3. Use crop rotation to maintain nutrients\n"
        "4. Apply fertilizers based on soil test results\n"
        "5. Consider cover crops in off-season\n\n"
        "Would you like specific fertilizer recommendations?",
    ),
    (
        ("water", "irrigation"),
        "Efficient water management saves resources! Tips:\n\n"
        "1. Use drip irrigation for water efficiency\n"
        "2. Water early morning or evening\n"
        "3. Monitor soil moisture levels\n"
        "4. Mulch to retain moisture\n"
        "5. Collect rainwater when possible\n\n"
        "Track your water usage in the Inventory section!",
    ),
    (
        ("crop", "plant"),
        "Crop selection depends on several factors:\n\n"
        "1. Local climate and season\n"
        "2. Soil type (check your Land Management section)\n"
        "3. Water availability\n"
        "4. Market demand\n"
        "5. Your experience level\n\n"
        "Use the Crops Management module to track planting dates and expected harvests. "
        "What crop are you interested in?",
    ),
    (
        ("disease", "fungus"),
        "Plant diseases need quick action! General advice:\n\n"
        "1. Remove infected plants immediately\n"
        "2. Improve air circulation\n"
        "3. Avoid overhead watering\n"
        "4. Use disease-resistant varieties\n"
        "5. Apply appropriate fungicides if needed\n\n"
        "Early detection is key. Describe the symptoms you're seeing?",
    ),
    (
        ("harvest", "yield"),
        "Maximize your harvest with these tips:\n\n"
        "1. Harvest at the right maturity stage\n"
        "2. Use proper harvesting techniques\n"
        "3. Handle crops carefully to avoid damage\n"
        "4. Store in appropriate conditions\n"
        "5. Track yields in your Crops Management section\n\n"
        "Your dashboard shows upcoming harvests. What crop are you harvesting?",
    ),
    (
        ("organic", "chemical-free"),
        "Organic farming is wonderful! Key practices:\n\n"
        "1. Use compost and natural fertilizers\n"
        "2. Implement crop rotation\n"
        "3. Use biological pest control\n"
        "4. Avoid synthetic chemicals\n"
        "5. Maintain soil health naturally\n\n"
        "Track your organic inputs in the Inventory section. Need specific organic solutions?",
    ),
    (
        ("profit", "money", "finance"),
        "Financial management is crucial! Use your Financial Tracking module to:\n\n"
        "1. Record all expenses and revenue\n"
        "2. Track profit margins per crop\n"
        "3. Identify cost-saving opportunities\n"
        "4. Plan budgets for next season\n"
        "5. Monitor ROI on equipment\n\n"
        "Would you like tips on reducing costs or increasing revenue?",
    ),
    (
        ("equipment", "machinery", "tool"),
        "Proper equipment maintenance saves money! Remember to:\n\n"
        "1. Follow regular maintenance schedules\n"
        "2. Store equipment properly\n"
        "3. Clean after each use\n"
        "4. Check for wear and damage\n"
        "5. Track maintenance in Tools Management\n\n"
        "Your dashboard alerts you when maintenance is due. What equipment do you need help with?",
    ),
)

FALLBACK_REPLY = (
    "That's a great question! As your farming assistant, I can help with:\n\n"
    "• Crop selection and planning\n"
    "• Pest and disease management\n"
    "• Soil health and fertilization\n"
    "• Irrigation and water management\n"
    "• Weather-related advice\n"
    "• Organic farming practices\n"
    "• Financial planning\n"
    "• Equipment maintenance\n\n"
    "Please ask me anything specific about your farm operations!"
)


def reply_to(message: str) -> str:
    text = message.lower()
    for keywords, reply in TOPICS:
        if any(keyword in text for keyword in keywords):
            return reply
    return FALLBACK_REPLY
