"""Shared submission payloads for the idea validation tests."""

PROFILE = (
    "Independent bakery owners and small business professionals in suburban towns, "
    "typically between thirty and fifty years of age, with modest income and a loyal "
    "local customer base who order supplies weekly."
)

PRODUCT_IDEA = (
    "A web platform that helps bakeries forecast ingredient demand from past sales, "
    "weather and local events, then places supplier orders automatically so owners "
    "spend less time on paperwork and avoid waste. The service integrates with common "
    "point of sale tools."
)

PAIN_POINTS = (
    "Owners face a recurring problem: ingredients spoil because orders are guessed by "
    "hand, and the daily struggle to track stock is a real frustration. This manual "
    "process is a bottleneck that costs money and hours every single week during busy seasons."
)

ALTERNATIVES = (
    "Existing inventory apps target large restaurant chains and are expensive. Unlike "
    "those tools, our approach is built for a single small bakery and is different "
    "because it learns from local sales patterns."
)

MARKET_VALIDATION = (
    "We interviewed twenty bakery owners and ran a two week prototype pilot with three "
    "shops. The data showed less spoiled stock, and owner feedback was positive enough "
    "to continue testing."
)

COMPETITOR_RESEARCH = (
    "Our research compared four inventory products on price, setup effort and forecasting "
    "depth. None of them offers demand forecasting tuned to small bakeries, and most "
    "require a dedicated manager."
)

INVESTOR_PITCH = (
    "We are raising a seed round to reach one thousand paying bakeries within two years "
    "through subscription pricing, partnerships with flour suppliers, and referrals from "
    "our pilot customers."
)

UNRELATED_IDEA = {
    "ideal_customer_profile": "University students learning a second language who want conversation practice.",
    "product_idea": "A matching service pairing language learners for short video conversations with structured prompts.",
    "pain_points": "Classroom lessons rarely give learners enough speaking time with native speakers.",
}


def draft_one():
    return {
        "full_name": "Sam Rivera",
        "project_name": "Bakery Forecasts",
        "ideal_customer_profile": PROFILE,
        "product_idea": PRODUCT_IDEA,
        "pain_points": PAIN_POINTS,
        "alternatives": ALTERNATIVES,
        "category": ["Food"],
        "heard_about": "A friend at a bakery meetup",
    }


def final_draft():
    submission = draft_one()
    submission.update({
        "market_validation": MARKET_VALIDATION,
        "competitor_research": COMPETITOR_RESEARCH,
        "additional_research": "Pilot shops shared their ordering logs for the last season.",
        "investor_pitch": INVESTOR_PITCH,
        "mvp_development": "A working forecast dashboard connected to one supplier.",
        "mvp_link": "https://bakery-forecasts.example.com/demo",
    })
    return submission
