FIND_SCHEMES_PROMPT = """
You are an expert on Indian agricultural policies and government schemes.

A farmer has provided their state and primary crop type. Your task is to identify the top 2-3 most relevant and beneficial central and state-level government schemes available to them.

For each scheme, provide a clear and concise summary covering its name, description, eligibility, and key benefits. Focus on schemes related to crop insurance, credit access, subsidies for seeds/fertilizers, and equipment.

Farmer's State: {state}
Primary Crop: {crop_type}

Generate a list of the most impactful schemes.
"""
