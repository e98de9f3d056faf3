"""Sample FAQ entries inserted when the database is first created."""

from typing import List, Tuple

SEED_FAQS: List[Tuple[str, str]] = [
    (
        "What are your hours of operation?",
        "Our support team operates from 9 AM to 5 PM, Monday to Friday, Central Time (CT). "
        "We are closed on all major US holidays.",
    ),
    (
        "How do I reset my password?",
        "You can reset your password by clicking the 'Forgot Password' link on the login page. "
        "A secure link will be sent to your registered email address.",
    ),
    (
        "What is the return policy?",
        "We offer a 30-day full refund policy for all digital products from the date of purchase. "
        "Physical items must be returned within 14 days in original, unopened packaging.",
    ),
    (
        "What is the required tech stack for the CIMBA chatbot project?",
        "The required tech stack is React, Spring Boot (or Node/Express), MongoDB (or SQLite), "
        "and the OpenAI API (or Gemini API).",
    ),
    (
        "Where can I find my order tracking number?",
        "Your tracking number is included in the 'Shipping Confirmation' email sent within "
        "24 hours of your order being dispatched.",
    ),
    (
        "Can I modify an order after it has been placed?",
        "No, once an order is placed, it immediately enters fulfillment and cannot be "
        "modified or cancelled.",
    ),
]
