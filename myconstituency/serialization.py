from typing import Dict, List

from myconstituency.model import Buckets, LookupResult, Representative, VoteRecord

OPTIONAL_REPRESENTATIVE_FIELDS = ("district_name", "party_name", "email", "url", "photo_url", "source_url")


def vote_record_to_json(record: VoteRecord) -> Dict:
    return {
        "title": record.title,
        "date": record.date,
        "vote": record.vote.value,
        "passed": record.passed,
        "official_url": record.official_url,
    }


def representative_to_json(rep: Representative) -> Dict:
    result = {
        "name": rep.name,
        "elected_office": rep.elected_office,
    }
    for field_name in OPTIONAL_REPRESENTATIVE_FIELDS:
        value = getattr(rep, field_name)
        if value:
            result[field_name] = value
    if rep.offices:
        result["offices"] = rep.offices
    return result


def representatives_to_json(reps: List[Representative]) -> List[Dict]:
    return [representative_to_json(rep) for rep in reps]


def buckets_to_json(buckets: Buckets) -> Dict:
    result = {
        "municipal": representatives_to_json(buckets.municipal),
        "provincial": representatives_to_json(buckets.provincial),
        "federal": representatives_to_json(buckets.federal),
    }
    if buckets.unclassified:
        result["unclassified"] = representatives_to_json(buckets.unclassified)
    return result


def lookup_result_to_json(result: LookupResult) -> Dict:
    data = {"postal": result.postal}
    if result.city:
        data["city"] = result.city
    if result.province:
        data["province"] = result.province
    data["reps"] = buckets_to_json(result.reps)
    if result.note:
        data["note"] = result.note
    return data


# JSON to object serialization:
# -----------------------------
def json_dict_to_representative(data: Dict) -> Representative:
    extra = data.get("extra") or {}
    roles = extra.get("roles") if isinstance(extra, dict) else None
    offices = data.get("offices")

    return Representative(
        name=data.get("name") or "",
        elected_office=data.get("elected_office") or "",
        district_name=data.get("district_name"),
        party_name=data.get("party_name"),
        email=data.get("email"),
        url=data.get("url"),
        photo_url=data.get("photo_url"),
        offices=[o for o in offices if isinstance(o, dict)] if isinstance(offices, list) else [],
        source_url=data.get("source_url"),
        roles=[r for r in roles if isinstance(r, str)] if isinstance(roles, list) else [],
    )


def json_list_to_representatives(data) -> List[Representative]:
    if not isinstance(data, list):
        return []
    return [json_dict_to_representative(item) for item in data if isinstance(item, dict)]
