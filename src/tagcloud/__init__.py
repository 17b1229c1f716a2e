"""tagcloud 패키지.

텍스트 문서를 토큰화하여 단어 빈도를 집계하고, 상위 N개 단어를
빈도에 비례한 폰트 등급으로 표시하는 HTML 태그 클라우드를 생성한다.
"""
