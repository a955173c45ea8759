"""Static company and product overview."""

MISSION = (
    "Risidio is on a mission to empower creators and brands through innovative "
    "blockchain technology. We build products that make digital ownership accessible, "
    "transparent, and valuable for everyone."
)

VALUES = [
    "Innovation First: We embrace cutting-edge technology to solve real problems",
    "Creator-Centric: Our users' success is our success",
    "Transparency: We believe in open communication and honest feedback",
    "Collaboration: We work together across teams to achieve our goals",
    "Continuous Learning: We grow together and support each other's development",
]

CULTURE = (
    "We foster a remote-first, async-friendly culture where autonomy and ownership are "
    "valued. We encourage experimentation, celebrate wins together, and learn from "
    "failures as a team."
)

WAYS_OF_WORKING = [
    "Remote-first: Work from anywhere, collaborate asynchronously",
    "Weekly sync-ups: Join #weekly-update for company-wide progress",
    "Async communication: Use Slack threads and document decisions",
    "Regular 1:1s: Connect with your manager weekly or bi-weekly",
]

PRODUCT_DESCRIPTION = (
    "Lunim is Risidio's flagship platform for digital asset management and NFT "
    "marketplaces. It enables creators, brands, and enterprises to launch their own "
    "branded NFT experiences with ease."
)

PRODUCT_FEATURES = [
    "White-label NFT marketplace creation",
    "Customizable storefront and branding",
    "Multi-chain support (Ethereum, Polygon, etc.)",
    "Creator tools for minting and managing collections",
    "Built-in analytics and reporting",
]

PRODUCT_CHANNELS = [
    "#lunim-dev - Development discussions",
    "#lunim-product - Product updates and roadmap",
    "#lunim-support - Customer support issues",
]


def format_company_overview(company_name: str = "Risidio", product_name: str = "Lunim") -> str:
    """Mission, values, culture and product summary as one message."""
    values = "\n".join(f"{i}. {v}" for i, v in enumerate(VALUES, start=1))
    ways = "\n".join(f"• {w}" for w in WAYS_OF_WORKING)
    features = "\n".join(f"• {f}" for f in PRODUCT_FEATURES)
    channels = "\n".join(f"• {c}" for c in PRODUCT_CHANNELS)
    return (
        f"*About {company_name}*\n\n{MISSION}\n\n"
        f"*Our Values:*\n{values}\n\n"
        f"*Culture:*\n{CULTURE}\n\n"
        f"*How We Work:*\n{ways}\n\n"
        f"*About {product_name}*\n\n{PRODUCT_DESCRIPTION}\n\n"
        f"*Key Features:*\n{features}\n\n"
        f"*{product_name} Channels:*\n{channels}"
    )
