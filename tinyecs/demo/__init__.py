"""Demo components, systems and a walkthrough example for tinyecs."""