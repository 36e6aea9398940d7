"""Built-in content: the book catalog, affirmation templates and quest templates."""

from manifest_garden.domain.entities import (
    Book,
    BookCategory,
    BookPage,
    ManifestationCategory,
    QuestType,
    SeedRarity,
)

CATEGORY_COLORS = {
    ManifestationCategory.ABUNDANCE: "#FFD700",
    ManifestationCategory.LOVE: "#FF69B4",
    ManifestationCategory.HEALTH: "#00CED1",
    ManifestationCategory.SUCCESS: "#9370DB",
    ManifestationCategory.PEACE: "#98FB98",
}

AVAILABLE_BOOKS = [
    Book(
        id="success-virus",
        title="The Success Virus: A Manifestation Story",
        author="@thesuccess.virus",
        description=(
            "Discover the power of manifestation through an inspiring story that will "
            "transform your mindset and attract abundance into your life."
        ),
        cover_url="https://images.unsplash.com/photo-1544947950-fa07a98d237f?w=400&h=600&fit=crop",
        price=33.3,
        category=BookCategory.MANIFESTATION,
        pages=[
            BookPage(
                id="1",
                page_number=1,
                content=(
                    "Welcome to The Success Virus...\n\n"
                    "This is the beginning of your transformation journey. Every thought you "
                    "think, every word you speak, and every action you take is creating your "
                    "reality.\n\n"
                    "The success virus is not just a concept. It's a way of life. It's about "
                    "rewiring your mind to attract success, abundance, and joy into every "
                    "aspect of your existence."
                ),
            ),
            BookPage(
                id="2",
                page_number=2,
                content=(
                    "Chapter 1: The Awakening\n\n"
                    "Success begins with a single decision: the decision to believe in "
                    "yourself and your dreams. When you plant the seed of intention, you "
                    "begin a powerful transformation.\n\n"
                    "Your thoughts are like seeds in a garden. What you nurture will grow. "
                    "What you neglect will wither. The choice is always yours."
                ),
            ),
            BookPage(
                id="3",
                page_number=3,
                content=(
                    "The Power of Daily Practice\n\n"
                    "Manifestation is not a one-time event. It's a daily practice of aligning "
                    "your thoughts, emotions, and actions with your desires.\n\n"
                    "Every morning, set your intentions. Every evening, express gratitude. "
                    "This simple practice will shift your entire reality."
                ),
            ),
        ],
    ),
    Book(
        id="manifestation-mastery",
        title="Manifestation Mastery",
        author="@thesuccess.virus",
        description=(
            "A comprehensive guide to mastering the art of manifestation. Learn advanced "
            "techniques to accelerate your manifestations and create the life you desire."
        ),
        cover_url="https://images.unsplash.com/photo-1512820790803-83ca734da794?w=400&h=600&fit=crop",
        price=22.2,
        category=BookCategory.MANIFESTATION,
        pages=[
            BookPage(
                id="1",
                page_number=1,
                content=(
                    "Manifestation Mastery: Introduction\n\n"
                    "You are about to embark on a journey that will unlock your true "
                    "potential. This book contains the secrets that top manifestors use to "
                    "create extraordinary results.\n\n"
                    "Are you ready to master your reality?"
                ),
            ),
            BookPage(
                id="2",
                page_number=2,
                content=(
                    "The 3 Pillars of Manifestation\n\n"
                    "1. Clarity: Know exactly what you want\n"
                    "2. Energy: Align your vibration with your desires\n"
                    "3. Action: Take inspired steps toward your goals\n\n"
                    "Master these three pillars, and nothing can stop you."
                ),
            ),
        ],
    ),
    Book(
        id="spiritual-awakening",
        title="The Spiritual Awakening Guide",
        author="@thesuccess.virus",
        description=(
            "Unlock your spiritual potential and connect with your higher self. A "
            "transformative journey into consciousness and enlightenment."
        ),
        cover_url="https://images.unsplash.com/photo-1506905925346-21bda4d32df4?w=400&h=600&fit=crop",
        price=22.2,
        category=BookCategory.SPIRITUALITY,
        pages=[
            BookPage(
                id="1",
                page_number=1,
                content=(
                    "The Spiritual Awakening Guide\n\n"
                    "Welcome, seeker. You have been called to this moment for a reason. Your "
                    "spiritual awakening is not an accident. It is your soul's invitation to "
                    "remember who you truly are."
                ),
            ),
            BookPage(
                id="2",
                page_number=2,
                content=(
                    "Chapter 1: Awakening to Your Truth\n\n"
                    "You are not just a physical being having a spiritual experience. You "
                    "are a spiritual being having a physical experience.\n\n"
                    "When you realize this fundamental truth, everything changes."
                ),
            ),
        ],
    ),
]

# Used when the gardener has nothing in their inventory yet
DEFAULT_WEEKLY_CATEGORIES = ["wealth", "love", "health", "success", "happiness"]

MANIFESTATION_TEMPLATES = [
    "Today, I embrace abundance in {category}",
    "I am worthy of success and {category} flows to me effortlessly",
    "My intentions for {category} are manifesting in divine timing",
    "I attract positive energy and miracles in {category}",
    "Today brings new opportunities for growth in {category}",
    "I am perfectly aligned with my {category} goals and dreams",
    "I trust the universe to guide my {category} journey with wisdom",
    "My {category} dreams are becoming my reality right now",
    "I radiate confidence and joy in my {category} path",
    "I am deeply grateful for the {category} I have and what's manifesting",
    "Today, I take inspired action toward my {category} vision",
    "I release all doubts and fears about my {category} success",
    "My powerful energy attracts infinite miracles in {category}",
    "I am open to receiving all the abundant {category} I desire",
    "Today, I choose to focus on {category} with crystal clarity",
    "I trust my intuition to guide me perfectly in {category}",
    "My {category} intentions are powerful, real, and manifesting now",
    "I deeply deserve all the wonderful {category} coming my way",
    "I am becoming the highest version of myself in {category}",
    "The universe conspires to help me achieve {category} beyond imagination",
    "I am a magnet for positive {category} experiences and blessings",
    "My heart is open to receive limitless {category} abundance",
    "Every day I grow stronger and more aligned with {category}",
    "I celebrate my {category} journey and trust the process completely",
    "Divine timing brings me exactly what I need for {category}",
    "I am surrounded by love and support in my {category} path",
    "My {category} manifestations exceed my wildest expectations",
    "I claim my birthright of abundant {category} with gratitude",
    "The universe delivers {category} to me in miraculous ways",
    "I am worthy of extraordinary {category} success and happiness",
]

# (type, title, description, target, gems, energy)
QUEST_TEMPLATES = [
    (QuestType.NURTURE, "Daily Care", "Nurture 5 manifestations", 5, 35, 8),
    (QuestType.NURTURE, "Extra Love", "Nurture 10 manifestations", 10, 60, 15),
    (QuestType.PLANT, "New Beginnings", "Plant 2 new manifestations", 2, 45, None),
    (QuestType.HARVEST, "Harvest Time", "Harvest 1 blooming manifestation", 1, 55, 12),
    (QuestType.SHARE, "Spread Joy", "Share 2 manifestations to community", 2, 70, None),
    (QuestType.STREAK, "Consistency is Key", "Maintain your login streak", 1, 30, 8),
]
DAILY_QUEST_COUNT = 3

# Odds for a seed acquired without a chosen rarity
SEED_RARITY_WEIGHTS = {
    SeedRarity.COMMON: 0.5,
    SeedRarity.RARE: 0.3,
    SeedRarity.EPIC: 0.15,
    SeedRarity.LEGENDARY: 0.05,
}
