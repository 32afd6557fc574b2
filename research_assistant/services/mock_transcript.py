"""Placeholder transcription: no speech-to-text happens here.

The processing job picks one of three canned interviews at random and
prefixes it with the uploaded file name.
"""
import random

MIN_DURATION_SEC = 300
MAX_DURATION_SEC = 3600

TEMPLATES = [
    """Interviewer: Thank you for joining us today. Could you start by telling us about your company's current market position?

Interviewee: Absolutely. We've been operating in the B2B software space for about 8 years now, and we've seen significant growth, especially in the last two years. Our recurring revenue has grown by 150% year-over-year, and we're currently serving over 2,000 enterprise clients.

Interviewer: That's impressive growth. What would you say are the main drivers behind this success?

Interviewee: I think there are three key factors. First, we identified a gap in the market early on - businesses were struggling with data integration across multiple platforms. Second, our team has deep domain expertise, with most of our engineers having 10+ years of experience in enterprise software. And third, we've been very focused on customer success and retention.

Interviewer: What challenges are you currently facing as you scale?

Interviewee: The main challenge is talent acquisition. We're growing so fast that we need to double our engineering team in the next 12 months, but finding qualified candidates is extremely difficult in today's market. We're also facing increased competition from larger players who are starting to notice our success.

Interviewer: How do you see the competitive landscape evolving?

Interviewee: We expect consolidation in our space within the next 2-3 years. The larger tech companies are acquiring smaller players, which creates both threats and opportunities for us. We need to either scale quickly enough to compete directly or position ourselves as an attractive acquisition target.

Interviewer: What are your funding needs and how would you use additional capital?

Interviewee: We're looking to raise $50M in Series B funding. The primary use would be scaling our sales and engineering teams, with about 60% going to talent acquisition, 25% to product development, and 15% to market expansion. We see a clear path to $100M ARR within 24 months with the right resources.""",

    """Interviewer: Let's discuss your company's financial performance over the past few years.

Interviewee: Our financials have been quite strong. We achieved profitability in year 3, which is relatively early for a SaaS company. Our gross margins are around 85%, and we've maintained an efficient CAC to LTV ratio of 1:5.

Interviewer: Can you walk us through your revenue model?

Interviewee: We operate on a subscription model with three tiers: Basic at $500/month, Professional at $2,000/month, and Enterprise starting at $10,000/month. About 70% of our revenue comes from the Professional tier, which targets mid-market companies. Our net revenue retention is 125%, indicating strong expansion within existing accounts.

Interviewer: What are the biggest risks you see for your business?

Interviewee: There are several risks we monitor closely. Technology risk is significant - our industry moves fast, and we need to continuously innovate to stay relevant. Regulatory changes, especially around data privacy, could impact our operations. And there's always the risk of new entrants with significant funding disrupting the market.

Interviewer: How do you approach product development and innovation?

Interviewee: We follow a data-driven approach. We spend a lot of time with our customers understanding their pain points. Our product roadmap is primarily driven by customer feedback and usage analytics. We also allocate about 20% of our engineering resources to experimental features and emerging technologies.

Interviewer: What's your international expansion strategy?

Interviewee: We're currently focused on the North American market, but we see significant opportunities in Europe and Asia-Pacific. We plan to enter the European market next year, starting with the UK and Germany. The regulatory environment in Europe is more complex, but the market opportunity is substantial.""",

    """Interviewer: Could you describe the management team and organizational structure?

Interviewee: Our leadership team brings together complementary skills. I handle strategy and business development, our CTO leads product and engineering, and our VP of Sales manages all revenue operations. We've kept the organization relatively flat to maintain agility, but we're starting to add middle management as we scale.

Interviewer: How do you maintain company culture during rapid growth?

Interviewee: Culture is something we think about constantly. We've documented our core values and ensure they're part of every hiring decision. We do quarterly all-hands meetings and maintain an open communication policy. The challenge is preserving the startup mentality while adding necessary processes and structure.

Interviewer: What role does technology play in your competitive advantage?

Interviewee: Technology is at the core of everything we do. We've built proprietary algorithms for data processing that give us a significant speed advantage over competitors. Our API response times are 3x faster than the industry average, and our uptime is 99.9%. We also have several patents pending on our core technology.

Interviewer: How do you see the next 5 years for your company?

Interviewee: We have an ambitious vision. In 5 years, we want to be the dominant platform in our category, with $500M+ in annual revenue. We see opportunities for horizontal expansion into adjacent markets and potentially strategic acquisitions. Going public is definitely on our roadmap, likely in the 3-4 year timeframe.

Interviewer: What would make this partnership successful from your perspective?

Interviewee: We're looking for more than just capital. We want a partner who understands our market and can provide strategic guidance as we scale. Access to your portfolio companies for potential partnerships or customers would be valuable. Most importantly, we want investors who share our long-term vision and won't pressure us for short-term returns at the expense of sustainable growth.""",
]


def generate_mock_transcript(file_name, rng=random):
    template = rng.choice(TEMPLATES)
    return f"File: {file_name}\n\nTranscript:\n\n{template}"


def random_duration(rng=random):
    """Fake audio length in whole seconds, in [300, 3600)."""
    return rng.randrange(MIN_DURATION_SEC, MAX_DURATION_SEC)
