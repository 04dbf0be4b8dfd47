from .base import Lawyer

LAWYERS = [
    # Consumer Court
    Lawyer("l1", "Adv. Priya Sharma", "Mumbai", "Maharashtra", "Consumer Court", 12,
           ["English", "Hindi", "Marathi"], "MH/1234/2012", "Mon-Fri, 10 AM - 6 PM", 4.8, 245),
    Lawyer("l2", "Adv. Rajesh Kumar", "Delhi", "Delhi", "Consumer Court", 15,
           ["English", "Hindi", "Punjabi"], "DL/5678/2009", "Mon-Sat, 9 AM - 7 PM", 4.9, 312),
    Lawyer("l3", "Adv. Meera Patel", "Ahmedabad", "Gujarat", "Consumer Court", 8,
           ["English", "Hindi", "Gujarati"], "GJ/9012/2016", "Mon-Fri, 11 AM - 5 PM", 4.6, 156),
    # Family Law
    Lawyer("l4", "Adv. Sunita Reddy", "Hyderabad", "Telangana", "Family Law", 18,
           ["English", "Hindi", "Telugu"], "TS/3456/2006", "Mon-Fri, 10 AM - 6 PM", 4.7, 289),
    Lawyer("l5", "Adv. Vikram Singh", "Jaipur", "Rajasthan", "Family Law", 10,
           ["English", "Hindi"], "RJ/7890/2014", "Tue-Sat, 10 AM - 7 PM", 4.5, 198),
    # Criminal Law
    Lawyer("l6", "Adv. Arjun Menon", "Kochi", "Kerala", "Criminal Law", 20,
           ["English", "Hindi", "Malayalam"], "KL/2345/2004", "Mon-Sat, 9 AM - 8 PM", 4.9, 412),
    Lawyer("l7", "Adv. Neha Gupta", "Lucknow", "Uttar Pradesh", "Criminal Law", 14,
           ["English", "Hindi", "Urdu"], "UP/6789/2010", "Mon-Fri, 10 AM - 6 PM", 4.6, 267),
    # Property Disputes
    Lawyer("l8", "Adv. Suresh Iyer", "Chennai", "Tamil Nadu", "Property Disputes", 22,
           ["English", "Hindi", "Tamil"], "TN/0123/2002", "Mon-Fri, 9 AM - 5 PM", 4.8, 356),
    Lawyer("l9", "Adv. Kavita Joshi", "Pune", "Maharashtra", "Property Disputes", 11,
           ["English", "Hindi", "Marathi"], "MH/4567/2013", "Mon-Sat, 10 AM - 6 PM", 4.5, 189),
    # Labour Law
    Lawyer("l10", "Adv. Ramesh Agarwal", "Kolkata", "West Bengal", "Labour Law", 16,
           ["English", "Hindi", "Bengali"], "WB/8901/2008", "Mon-Fri, 10 AM - 7 PM", 4.7, 234),
    Lawyer("l11", "Adv. Pooja Nair", "Bangalore", "Karnataka", "Labour Law", 9,
           ["English", "Hindi", "Kannada"], "KA/2345/2015", "Tue-Sat, 11 AM - 6 PM", 4.4, 145),
    # Cyber Crime
    Lawyer("l12", "Adv. Aditya Saxena", "Noida", "Uttar Pradesh", "Cyber Crime", 7,
           ["English", "Hindi"], "UP/6780/2017", "Mon-Sat, 10 AM - 8 PM", 4.8, 112),
    Lawyer("l13", "Adv. Divya Krishnan", "Gurgaon", "Haryana", "Cyber Crime", 6,
           ["English", "Hindi", "Tamil"], "HR/1234/2018", "Mon-Fri, 9 AM - 6 PM", 4.6, 89),
    # Corporate Law
    Lawyer("l14", "Adv. Amit Deshmukh", "Mumbai", "Maharashtra", "Corporate Law", 19,
           ["English", "Hindi", "Marathi"], "MH/0987/2005", "Mon-Fri, 9 AM - 7 PM", 4.9, 398),
    Lawyer("l15", "Adv. Ritu Kapoor", "Delhi", "Delhi", "Corporate Law", 13,
           ["English", "Hindi"], "DL/6543/2011", "Mon-Sat, 10 AM - 6 PM", 4.7, 267),
    # Civil Law
    Lawyer("l16", "Adv. Manoj Tiwari", "Bhopal", "Madhya Pradesh", "Civil Law", 17,
           ["English", "Hindi"], "MP/3210/2007", "Mon-Fri, 10 AM - 5 PM", 4.6, 298),
    Lawyer("l17", "Adv. Ananya Das", "Guwahati", "Assam", "Civil Law", 12,
           ["English", "Hindi", "Assamese"], "AS/7654/2012", "Mon-Sat, 9 AM - 6 PM", 4.5, 178),
    # Tax Law
    Lawyer("l18", "Adv. Sanjay Bhatt", "Surat", "Gujarat", "Tax Law", 21,
           ["English", "Hindi", "Gujarati"], "GJ/0012/2003", "Mon-Fri, 10 AM - 6 PM", 4.8, 345),
    Lawyer("l19", "Adv. Shreya Malhotra", "Chandigarh", "Punjab", "Family Law", 9,
           ["English", "Hindi", "Punjabi"], "PB/5678/2015", "Mon-Fri, 10 AM - 6 PM", 4.6, 134),
    Lawyer("l20", "Adv. Deepak Verma", "Patna", "Bihar", "Criminal Law", 15,
           ["English", "Hindi", "Bhojpuri"], "BR/3456/2009", "Mon-Sat, 9 AM - 7 PM", 4.7, 278),
]
