"""Default FAQ table shipped with the package."""

from buddy.faq.matcher import FAQEntry


def _faq(id: str, question: str, answer: str, keywords: list[str], category: str) -> FAQEntry:
    return FAQEntry(
        id=id,
        question=question,
        answer=answer,
        keywords=frozenset(keywords),
        category=category,
    )


DEFAULT_FAQS: tuple[FAQEntry, ...] = (
    _faq(
        "company-mission",
        "What is Risidio's mission?",
        "Risidio is on a mission to empower creators and brands through innovative "
        "blockchain technology. We build products that make digital ownership "
        "accessible, transparent, and valuable for everyone.",
        ["mission", "risidio", "purpose", "goal"],
        "company",
    ),
    _faq(
        "company-values",
        "What are Risidio's core values?",
        "Our core values are:\n"
        "1. Innovation First - We embrace cutting-edge technology to solve real problems\n"
        "2. Creator-Centric - Our users' success is our success\n"
        "3. Transparency - We believe in open communication and honest feedback\n"
        "4. Collaboration - We work together across teams to achieve our goals\n"
        "5. Continuous Learning - We grow together and support each other's development",
        ["values", "principles", "culture", "beliefs"],
        "company",
    ),
    _faq(
        "product-lunim-overview",
        "What is Lunim?",
        "Lunim is Risidio's flagship platform for digital asset management and NFT "
        "marketplaces. It enables creators, brands, and enterprises to launch their "
        "own branded NFT experiences with ease.",
        ["lunim", "product", "platform", "nft", "marketplace"],
        "product",
    ),
    _faq(
        "product-tech-stack",
        "What technology does Lunim use?",
        "Lunim is built on:\n"
        "• Frontend: React, TypeScript, Next.js\n"
        "• Backend: Node.js, PostgreSQL\n"
        "• Blockchain: Ethereum, Polygon, Web3.js\n"
        "• Infrastructure: AWS, Docker, Kubernetes",
        ["tech", "technology", "stack", "built"],
        "product",
    ),
    _faq(
        "policy-pto",
        "How do I request time off or PTO?",
        "To request time off:\n"
        "1. Submit your request in advance (at least 2 weeks for planned time off)\n"
        "2. Use the HR management system or ask your manager for the process\n"
        "3. Keep your team informed about your absence\n"
        "4. Set an out-of-office message in Slack\n"
        "5. Delegate critical tasks before you leave\n"
        "For emergency time off, notify your manager directly in Slack or by phone.",
        ["pto", "time off", "vacation", "leave", "absence", "days off"],
        "policies",
    ),
    _faq(
        "policy-expenses",
        "How do I request expense reimbursement?",
        "Keep your receipts and submit them through the expense process shared in "
        "your onboarding materials. Pre-approval from your manager is needed for "
        "anything beyond small day-to-day costs. If the process is unclear, ask your "
        "manager or the operations contact.",
        ["expenses", "reimbursement", "receipt", "submit", "cost"],
        "policies",
    ),
    _faq(
        "channels-general",
        "What are the main Slack channels I should join?",
        "Start with:\n"
        "• #onboarding-december - your cohort channel for onboarding support\n"
        "• #weekly-update - weekly company progress updates\n"
        "• #ask-anything - questions about processes, tools, and anything else\n"
        "• #celebrations - team wins and milestones\n"
        "You'll be invited to team and project channels as you ramp up.",
        ["channels", "slack", "join", "main", "important"],
        "channels",
    ),
    _faq(
        "tools-github",
        "How do I get access to GitHub?",
        "Share your GitHub username with your manager or in #all-engineers and you "
        "will be added to the organisation. Enable two-factor authentication before "
        "you are granted access to private repositories.",
        ["github", "git", "code", "repository"],
        "tools",
    ),
    _faq(
        "tools-notion",
        "How do I access Notion and documentation?",
        "Most onboarding material lives in Notion. You'll receive an invite during "
        "your first days; if it hasn't arrived, ask your manager. The engineering "
        "wiki and design system are linked from the onboarding hub.",
        ["notion", "documentation", "wiki", "docs", "knowledge"],
        "tools",
    ),
    _faq(
        "firstweek-what-to-do",
        "What should I focus on in my first week?",
        "In your first week:\n"
        "• Get access to all tools and platforms (Slack, GitHub, Notion)\n"
        "• Join the Slack channels for your role\n"
        "• Complete HR paperwork and compliance training\n"
        "• Schedule intro calls with your team\n"
        "• Review key documentation and product demos\n"
        "• Ask questions, there are no stupid questions!",
        ["first week", "onboarding", "start", "beginning", "priorities"],
        "firstweek",
    ),
    _faq(
        "firstweek-questions",
        "How should I ask questions during onboarding?",
        "Ask early and in public channels so others can learn too. Share what you're "
        "trying to do, what you've tried, and where you're stuck. #ask-anything and "
        "your cohort channel are good places to start.",
        ["questions", "ask", "help", "support", "confused"],
        "firstweek",
    ),
    _faq(
        "benefits-overview",
        "What benefits and perks do we offer?",
        "Benefits depend on your contract and location. Your HR point of contact can "
        "walk you through what applies to you, including learning budget, equipment "
        "and flexible working arrangements.",
        ["benefits", "perks", "learning budget", "insurance"],
        "benefits",
    ),
)
