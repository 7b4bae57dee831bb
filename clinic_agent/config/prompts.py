"""Conversation prompts and templates.

Placeholders: {name}, {age}, {issue}, {slot} come from the patient profile;
{clinic}, {doctor}, {specialization}, {services}, {hours}, {fee} come from the
clinic profile.
"""

GREETING_PROMPT = (
    "Namaste ji! Main {clinic} se bol rahi hoon. Aap kaise hain ji? "
    "Apna poora naam bataiye ji."
)

# Question asked while waiting on each step
STEP_PROMPTS = {
    "askName": "Apna poora naam bataiye ji.",
    "askAge": "{name} ji, aapki umar kitni hai ji?",
    "askIssue": "Aap kis samasya ke liye appointment lena chahte hain ji?",
    "askTime": "Aapko kaunsa din ya time appointment ke liye theek lagta hai ji?",
    "completed": "Kisi aur madad ki zarurat ho to zaroor bataye ji.",
}

# Used when the caller's answer did not satisfy the step
REASK_PROMPTS = {
    "askName": "Kripya apna poora naam spasht roop se bataye ji, main note kar leti hoon ji.",
    "askAge": "Kripya apni umar sankhya me bataye ji, jaise 32 ji.",
    "askIssue": "Kripya apni problem thoda sa detail me bataye ji, main likh rahi hoon ji.",
    "askTime": "Kripya ek specific din aur time bataye ji, jaise 'Somvaar sham 5 baje' ji.",
}

# Sent when a step is satisfied and the flow moves on
TRANSITION_PROMPTS = {
    "askName": "Bahut dhanyavaad {name} ji. Aapki umar kitni hai ji?",
    "askAge": "{name} ji, kis samasya ke liye appointment lena chahte hain ji?",
    "askIssue": "Theek hai ji. Appointment ke liye kaunsa din ya time aapko suit karega ji?",
}

# Sent in order once the slot is captured
BOOKING_PROMPTS = (
    "Bilkul ji, ek pal ke liye hold kijiye, main appointment confirm karti hoon ji.",
    "{name} ji, aapka appointment {slot} ke liye {doctor} ji ke saath confirm kar diya gaya hai ji. "
    "{issue} ke liye doctor tayar rahenge ji.",
    "Aapka appointment confirm kar diya gaya hai. "
    "Clinic ka address aur timing WhatsApp/SMS me bhej diya jayega ji.",
    "Kisi bhi aur prashn ke liye nishank hokar poochiye ji.",
)

# Sent in order when a confirmed booking gets a new slot
RESCHEDULE_PROMPTS = (
    "Bilkul ji, main aapka naya preferred time update kar rahi hoon ji.",
    "{name} ji, naya appointment {slot} par lock kar diya gaya hai ji.",
    "Clinic ka address aur timing dobara WhatsApp/SMS par share kar diya jayega ji.",
)

RESCHEDULE_REQUEST_PROMPT = "Zaroor ji, kripya naya convenient din aur time bataye ji."

IDLE_PROMPT = "Main yahin hoon ji, agar kisi aur madad ki zarurat ho to bataye ji."

# Fallbacks when the profile does not hold the field yet
DEFAULT_NAME = "Aap"
DEFAULT_ISSUE = "aapki samasya"

FAQ_ANSWERS = {
    "services": "Ji zaroor. {clinic} me {services} uplabdh hain ji.",
    "hours": "Clinic ka samay {hours} hai ji. Ravivaar ko band rehta hai ji.",
    "doctor": "{doctor} ji hamare lead {specialization} hain ji.",
    "fees": "Consultation fee {fee} hai ji, payment clinic me hi hoti hai ji.",
    "address": "Clinic ka exact address aapke WhatsApp/SMS par turant share kiya jayega ji.",
}

# Shortcut utterances offered to the caller
QUICK_REPLIES = {
    "intake": (
        "Main theek hoon ji.",
        "Mera naam Rahul Verma hai.",
        "Meri umar 32 hai.",
        "Mujhe bal girne ki problem hai.",
        "Kal dopahar 3 baje ka slot chalega?",
    ),
    "completed": (
        "Clinic ki services?",
        "Consultation fees kitni hai?",
        "Doctor ka naam kya hai?",
        "Mujhe dusra time chahiye.",
    ),
}
