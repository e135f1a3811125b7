"""
Static definition of the Namma Metro (Bengaluru) network.

Each line lists its stations in forward order. Rows are
(id, name, interchange_id, time_to_next_seconds, distance_to_next_km, lat, lon, platforms)
where the hop values describe the ride to the next station of the same line
and are zero on the last station.
"""

MAJESTIC = "MAJESTIC"
RV_ROAD = "RV_ROAD"

PURPLE_LINE = [
    ("P01", "Whitefield (Kadugodi)", None, 120, 1.1, 12.9955, 77.7578, {"forward": 1}),
    ("P02", "Hopefarm Channasandra", None, 105, 0.9, 12.9878, 77.7540, None),
    ("P03", "Kadugodi Tree Park", None, 110, 1.0, 12.9857, 77.7470, None),
    ("P04", "Pattandur Agrahara", None, 125, 1.2, 12.9877, 77.7381, None),
    ("P05", "Sri Sathya Sai Hospital", None, 95, 0.8, 12.9810, 77.7272, None),
    ("P06", "Nallurahalli", None, 105, 0.9, 12.9765, 77.7245, None),
    ("P07", "Kundalahalli", None, 95, 0.8, 12.9774, 77.7158, None),
    ("P08", "Seetharampalya", None, 100, 0.9, 12.9808, 77.7088, None),
    ("P09", "Hoodi", None, 100, 0.9, 12.9887, 77.7114, None),
    ("P10", "Garudacharapalya", None, 120, 1.2, 12.9935, 77.7036, None),
    ("P11", "Singayyanapalya", None, 150, 1.7, 12.9966, 77.6930, None),
    ("P12", "Krishnarajapura", None, 140, 1.6, 13.0001, 77.6776, None),
    ("P13", "Benniganahalli", None, 110, 1.2, 12.9910, 77.6630, None),
    ("P14", "Baiyappanahalli", None, 105, 1.0, 12.9907, 77.6524, {"forward": 1, "backward": 2}),
    ("P15", "Swami Vivekananda Road", None, 100, 1.0, 12.9859, 77.6449, None),
    ("P16", "Indiranagar", None, 130, 1.3, 12.9783, 77.6386, None),
    ("P17", "Halasuru", None, 100, 1.1, 12.9757, 77.6268, None),
    ("P18", "Trinity", None, 100, 1.1, 12.9730, 77.6170, None),
    ("P19", "Mahatma Gandhi Road", None, 105, 1.2, 12.9755, 77.6067, None),
    ("P20", "Cubbon Park", None, 90, 0.8, 12.9810, 77.5970, None),
    ("P21", "Dr. B.R. Ambedkar Station (Vidhana Soudha)", None, 105, 1.0, 12.9797, 77.5928, None),
    ("P22", "Sir M. Visvesvaraya Station (Central College)", None, 110, 1.2, 12.9740, 77.5840, None),
    ("P23", "Nadaprabhu Kempegowda Station (Majestic)", MAJESTIC, 90, 0.8, 12.9757, 77.5728,
     {"forward": 2, "backward": 1}),
    ("P24", "City Railway Station", None, 110, 1.1, 12.9760, 77.5660, None),
    ("P25", "Magadi Road", None, 115, 1.1, 12.9756, 77.5555, None),
    ("P26", "Balagangadharanagar (Hosahalli)", None, 100, 0.9, 12.9742, 77.5455, None),
    ("P27", "Vijayanagar", None, 115, 1.1, 12.9709, 77.5373, None),
    ("P28", "Attiguppe", None, 115, 1.1, 12.9619, 77.5334, None),
    ("P29", "Deepanjali Nagar", None, 105, 1.0, 12.9520, 77.5374, None),
    ("P30", "Mysuru Road", None, 100, 0.9, 12.9467, 77.5300, {"forward": 1, "backward": 2}),
    ("P31", "Pantharapalya - Nayandahalli", None, 95, 0.8, 12.9428, 77.5222, None),
    ("P32", "Rajarajeshwari Nagar", None, 130, 1.2, 12.9365, 77.5192, None),
    ("P33", "Jnanabharathi", None, 140, 1.5, 12.9356, 77.5083, None),
    ("P34", "Pattanagere", None, 140, 1.5, 12.9236, 77.4987, None),
    ("P35", "Kengeri Bus Terminal", None, 130, 1.3, 12.9146, 77.4878, None),
    ("P36", "Kengeri", None, 150, 1.8, 12.9080, 77.4763, None),
    ("P37", "Challaghatta", None, 0, 0.0, 12.8975, 77.4610, {"backward": 1}),
]

GREEN_LINE = [
    ("G01", "Madavara", None, 110, 1.0, 13.0573, 77.4728, {"forward": 1}),
    ("G02", "Chikkabidarakallu", None, 90, 0.8, 13.0526, 77.4878, None),
    ("G03", "Manjunathanagar", None, 90, 0.8, 13.0500, 77.4944, None),
    ("G04", "Nagasandra", None, 135, 1.4, 13.0480, 77.5000, {"forward": 1, "backward": 2}),
    ("G05", "Dasarahalli", None, 95, 0.8, 13.0434, 77.5124, None),
    ("G06", "Jalahalli", None, 95, 0.8, 13.0393, 77.5197, None),
    ("G07", "Peenya Industry", None, 100, 0.9, 13.0363, 77.5255, None),
    ("G08", "Peenya", None, 95, 0.8, 13.0330, 77.5334, None),
    ("G09", "Goraguntepalya", None, 120, 1.1, 13.0284, 77.5403, None),
    ("G10", "Yeshwanthpur", None, 110, 1.0, 13.0234, 77.5500, {"forward": 1, "backward": 2}),
    ("G11", "Sandal Soap Factory", None, 100, 0.9, 13.0146, 77.5539, None),
    ("G12", "Mahalakshmi", None, 110, 1.0, 13.0081, 77.5488, None),
    ("G13", "Rajajinagar", None, 95, 0.8, 12.9986, 77.5494, None),
    ("G14", "Mahakavi Kuvempu Road", None, 90, 0.7, 12.9984, 77.5569, None),
    ("G15", "Srirampura", None, 95, 0.8, 12.9966, 77.5634, None),
    ("G16", "Mantri Square Sampige Road", None, 150, 1.7, 12.9904, 77.5706, None),
    ("G17", "Nadaprabhu Kempegowda Station (Majestic)", MAJESTIC, 100, 1.0, 12.9757, 77.5728,
     {"forward": 3, "backward": 4}),
    ("G18", "Chickpete", None, 90, 0.7, 12.9668, 77.5747, None),
    ("G19", "Krishna Rajendra Market", None, 110, 1.2, 12.9609, 77.5747, None),
    ("G20", "National College", None, 90, 0.7, 12.9504, 77.5737, None),
    ("G21", "Lalbagh", None, 100, 0.9, 12.9466, 77.5801, None),
    ("G22", "South End Circle", None, 100, 1.0, 12.9381, 77.5800, None),
    ("G23", "Jayanagar", None, 90, 0.9, 12.9295, 77.5801, None),
    ("G24", "Rashtreeya Vidyalaya Road", RV_ROAD, 95, 0.9, 12.9217, 77.5802,
     {"forward": 1, "backward": 2}),
    ("G25", "Banashankari", None, 110, 1.0, 12.9153, 77.5737, None),
    ("G26", "Jaya Prakash Nagar", None, 130, 1.3, 12.9073, 77.5730, None),
    ("G27", "Yelachenahalli", None, 150, 1.7, 12.8960, 77.5703, None),
    ("G28", "Konanakunte Cross", None, 100, 0.9, 12.8838, 77.5530, None),
    ("G29", "Doddakallasandra", None, 95, 0.8, 12.8845, 77.5450, None),
    ("G30", "Vajarahalli", None, 100, 0.9, 12.8777, 77.5445, None),
    ("G31", "Thalaghattapura", None, 120, 1.2, 12.8712, 77.5385, None),
    ("G32", "Silk Institute", None, 0, 0.0, 12.8617, 77.5300, {"backward": 1}),
]

YELLOW_LINE = [
    ("Y01", "Rashtreeya Vidyalaya Road", RV_ROAD, 110, 1.1, 12.9217, 77.5802, {"forward": 3}),
    ("Y02", "Ragigudda", None, 100, 1.0, 12.9170, 77.5900, None),
    ("Y03", "Jayadeva Hospital", None, 120, 1.2, 12.9180, 77.5990, None),
    ("Y04", "BTM Layout", None, 140, 1.5, 12.9165, 77.6101, None),
    ("Y05", "Central Silk Board", None, 110, 1.1, 12.9177, 77.6238, {"forward": 1, "backward": 2}),
    ("Y06", "Bommanahalli", None, 120, 1.2, 12.9090, 77.6290, None),
    ("Y07", "Hongasandra", None, 100, 1.0, 12.8990, 77.6330, None),
    ("Y08", "Kudlu Gate", None, 110, 1.1, 12.8920, 77.6390, None),
    ("Y09", "Singasandra", None, 110, 1.1, 12.8830, 77.6440, None),
    ("Y10", "Hosa Road", None, 150, 1.7, 12.8740, 77.6500, None),
    ("Y11", "Beratena Agrahara", None, 160, 1.8, 12.8610, 77.6580, None),
    ("Y12", "Electronic City", None, 100, 1.0, 12.8452, 77.6602, None),
    ("Y13", "Infosys Foundation Konappana Agrahara", None, 110, 1.2, 12.8390, 77.6680, None),
    ("Y14", "Huskur Road", None, 100, 1.0, 12.8300, 77.6760, None),
    ("Y15", "Hebbagodi", None, 120, 1.3, 12.8240, 77.6830, None),
    ("Y16", "Bommasandra", None, 0, 0.0, 12.8170, 77.6900, {"backward": 1}),
]


def _line(name: str, color: str, rows: list) -> dict:
    return {
        "name": name,
        "color": color,
        "stations": [
            {
                "id": station_id,
                "name": station_name,
                "interchange_id": interchange_id,
                "time_to_next": time_to_next,
                "distance_to_next": distance_to_next,
                "lat": lat,
                "lon": lon,
                "platforms": platforms,
            }
            for (station_id, station_name, interchange_id, time_to_next,
                 distance_to_next, lat, lon, platforms) in rows
        ],
    }


# Line key -> line definition; dict order is display order
METRO_DATA = {
    "purple": _line("Purple Line", "#9B59B6", PURPLE_LINE),
    "green": _line("Green Line", "#2ECC71", GREEN_LINE),
    "yellow": _line("Yellow Line", "#F1C40F", YELLOW_LINE),
}
