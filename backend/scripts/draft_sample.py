import asyncio
import json
import sys
import logging
from pathlib import Path

# Add backend to path
sys.path.append(str(Path(__file__).parent.parent))

from app.core.config import get_settings
from app.services.drafting.service import DraftingHandler

logging.basicConfig(level=logging.INFO)

CASE_TEXT = """
अर्जदार श्रीमती सुनिता पाटील, रा. मूल, यांनी अंगणवाडी मदतनीस पदासाठी अर्ज केला.
निवड झालेली उमेदवार त्या महसुली गावातील रहिवासी नाही. सुनावणी दि. 12/02/2024 रोजी घेण्यात आली.
"""

GR_TEXT = """
शासन निर्णय क्र. एबावि-2019/प्र.क्र.12, दिनांक 05/06/2019:
अंगणवाडी सेविका/मदतनीस पदासाठी उमेदवार त्याच महसुली गावाचा स्थानिक रहिवासी असणे आवश्यक आहे.
"""

async def draft_sample():
    handler = DraftingHandler(get_settings())

    print("\n--- ANALYZE (facts only) ---")
    analyzed = await handler.handle("POST", {
        "mode": "analyze",
        "language": "mr",
        "texts": {"caseText": CASE_TEXT, "grText": GR_TEXT},
    })
    print("STATUS:", analyzed.status_code)
    print("FACTS:", json.dumps(analyzed.body.get("facts"), ensure_ascii=False, indent=2))

    print("\n--- ORDER (mr) using detected facts ---")
    order = await handler.handle("POST", {
        "mode": "order",
        "language": "mr",
        "caseNumber": "जिप/साप्र/अर्धन्या/12/2024",
        "applicantName": "श्रीमती सुनिता पाटील",
        "facts": analyzed.body.get("facts") or {},
        "texts": {"caseText": CASE_TEXT, "grText": GR_TEXT},
    })
    print("STATUS:", order.status_code)
    print("\nDRAFT PREVIEW:\n", (order.body.get("orderText") or order.body.get("raw") or order.body)[:800])

if __name__ == "__main__":
    asyncio.run(draft_sample())
