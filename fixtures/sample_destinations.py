"""
Hand-authored provinces, attractions and quiz options for demos and tests.
Shaped like rows from the provinces, province_attractions and quiz_options tables.
"""


PROVINCE_ROWS = [
    {
        "id": 1, "region_id": 1, "name_th": "เชียงใหม่", "name_en": "Chiang Mai",
        "nature_score": 5, "cafe_score": 5, "adventure_score": 3, "culture_score": 4, "sea_score": 0,
    },
    {
        "id": 2, "region_id": 1, "name_th": "น่าน", "name_en": "Nan",
        "nature_score": 5, "cafe_score": 3, "adventure_score": 2, "culture_score": 4, "sea_score": 0,
    },
    {
        "id": 3, "region_id": 2, "name_th": "กระบี่", "name_en": "Krabi",
        "nature_score": 4, "cafe_score": 2, "adventure_score": 5, "culture_score": 1, "sea_score": 5,
    },
    {
        "id": 4, "region_id": 2, "name_th": "ภูเก็ต", "name_en": "Phuket",
        "nature_score": 2, "cafe_score": 4, "adventure_score": 4, "culture_score": 2, "sea_score": 5,
    },
    {
        "id": 5, "region_id": 3, "name_th": "พระนครศรีอยุธยา", "name_en": "Ayutthaya",
        "nature_score": 1, "cafe_score": 3, "adventure_score": 1, "culture_score": 5, "sea_score": 0,
    },
    {
        "id": 6, "region_id": 3, "name_th": "กาญจนบุรี", "name_en": "Kanchanaburi",
        "nature_score": 5, "cafe_score": 2, "adventure_score": 4, "culture_score": 3, "sea_score": 0,
    },
]


ATTRACTION_ROWS = [
    {"id": 101, "province_id": 1, "name_th": "ดอยอินทนนท์", "name_en": "Doi Inthanon",
     "description": "Highest peak in Thailand", "categories": ["nature", "adventure"]},
    {"id": 102, "province_id": 1, "name_th": "นิมมานฯ", "name_en": "Nimman Road",
     "description": "Cafe street", "categories": ["cafe"]},
    {"id": 103, "province_id": 1, "name_th": "วัดพระธาตุดอยสุเทพ", "name_en": "Wat Phra That Doi Suthep",
     "description": None, "categories": ["culture", "nature"]},
    {"id": 104, "province_id": 1, "name_th": "ถนนคนเดิน", "name_en": "Sunday Walking Street",
     "description": "Night market", "categories": ["culture", "shopping"]},
    {"id": 201, "province_id": 2, "name_th": "ดอยเสมอดาว", "name_en": "Doi Samer Dao",
     "description": None, "categories": ["nature"]},
    {"id": 202, "province_id": 2, "name_th": "วัดภูมินทร์", "name_en": "Wat Phumin",
     "description": "Murals", "categories": ["culture"]},
    {"id": 301, "province_id": 3, "name_th": "อ่าวไร่เลย์", "name_en": "Railay Beach",
     "description": "Limestone cliffs and climbing", "categories": ["sea", "adventure"]},
    {"id": 302, "province_id": 3, "name_th": "สระมรกต", "name_en": "Emerald Pool",
     "description": None, "categories": ["nature"]},
    {"id": 401, "province_id": 4, "name_th": "หาดกะตะ", "name_en": "Kata Beach",
     "description": None, "categories": ["sea"]},
    {"id": 402, "province_id": 4, "name_th": "เมืองเก่าภูเก็ต", "name_en": "Phuket Old Town",
     "description": "Sino-Portuguese shophouses", "categories": ["culture", "cafe"]},
    {"id": 501, "province_id": 5, "name_th": "วัดไชยวัฒนาราม", "name_en": "Wat Chaiwatthanaram",
     "description": None, "categories": ["culture"]},
    {"id": 601, "province_id": 6, "name_th": "น้ำตกเอราวัณ", "name_en": "Erawan Falls",
     "description": "Seven-tier waterfall", "categories": ["nature", "adventure"]},
]


# One row per answer option. Each carries the trait weights it contributes.
OPTION_ROWS = [
    {"id": 1, "question_id": 1, "option_label": "A",
     "nature_score": 3, "cafe_score": 0, "adventure_score": 1, "culture_score": 0, "sea_score": 0},
    {"id": 2, "question_id": 1, "option_label": "B",
     "nature_score": 0, "cafe_score": 3, "adventure_score": 0, "culture_score": 1, "sea_score": 0},
    {"id": 3, "question_id": 2, "option_label": "A",
     "nature_score": 2, "cafe_score": 0, "adventure_score": 0, "culture_score": 0, "sea_score": 1},
    {"id": 4, "question_id": 2, "option_label": "B",
     "nature_score": 0, "cafe_score": 0, "adventure_score": 2, "culture_score": 0, "sea_score": 3},
    {"id": 5, "question_id": 3, "option_label": "A",
     "nature_score": 0, "cafe_score": 1, "adventure_score": 0, "culture_score": 3, "sea_score": 0},
    {"id": 6, "question_id": 3, "option_label": "B",
     "nature_score": None, "cafe_score": 0, "adventure_score": 3, "culture_score": 0, "sea_score": 2},
]
